"""Typed GitHub webhook events.

Only the fields needed to build a contribution record are modelled; every
other key in the payload is ignored by msgspec. The ``X-GitHub-Event``
header selects the struct a payload is decoded into.

Usage
-----
Parse a delivery once its signature has been checked::

    event = parse_webhook("pull_request", payload)
    match event:
        case PullRequestEvent():
            ...

"""

from __future__ import annotations

import datetime as dt
import typing as typ

import msgspec

from kudos.github.errors import WebhookPayloadError

__all__ = [
    "ISSUES_EVENT",
    "PULL_REQUEST_EVENT",
    "GitHubUser",
    "Issue",
    "IssuesEvent",
    "PullRequest",
    "PullRequestEvent",
    "UnsupportedEvent",
    "WebhookEvent",
    "parse_webhook",
]

PULL_REQUEST_EVENT = "pull_request"
ISSUES_EVENT = "issues"


class GitHubUser(msgspec.Struct, kw_only=True, frozen=True):
    """Account that authored a pull request or issue."""

    login: str


class PullRequest(msgspec.Struct, kw_only=True, frozen=True):
    """Pull request object embedded in a ``pull_request`` delivery."""

    user: GitHubUser
    created_at: dt.datetime | int
    url: str = ""
    title: str = ""


class Issue(msgspec.Struct, kw_only=True, frozen=True):
    """Issue object embedded in an ``issues`` delivery."""

    user: GitHubUser
    created_at: dt.datetime | int
    url: str = ""
    title: str = ""


class PullRequestEvent(msgspec.Struct, kw_only=True, frozen=True):
    """A ``pull_request`` webhook delivery."""

    action: str
    pull_request: PullRequest


class IssuesEvent(msgspec.Struct, kw_only=True, frozen=True):
    """An ``issues`` webhook delivery."""

    action: str
    issue: Issue


class UnsupportedEvent(msgspec.Struct, kw_only=True, frozen=True):
    """Any delivery whose event type produces no contribution."""

    event_type: str
    action: str | None = None


WebhookEvent: typ.TypeAlias = PullRequestEvent | IssuesEvent | UnsupportedEvent

_EVENT_TYPES: dict[str, type[PullRequestEvent | IssuesEvent]] = {
    PULL_REQUEST_EVENT: PullRequestEvent,
    ISSUES_EVENT: IssuesEvent,
}


class _AnyAction(msgspec.Struct):
    # Unsupported payloads only need to be JSON objects.
    action: str | None = None


def parse_webhook(event_type: str | None, payload: bytes) -> WebhookEvent:
    """Decode ``payload`` into the event struct named by ``event_type``.

    Parameters
    ----------
    event_type
        Value of the ``X-GitHub-Event`` header.
    payload
        JSON document extracted from the delivery body.

    Returns
    -------
    WebhookEvent
        A ``PullRequestEvent`` or ``IssuesEvent`` for supported deliveries,
        otherwise an ``UnsupportedEvent`` carrying the event name.

    Raises
    ------
    WebhookPayloadError
        If the event header is missing, the payload is not valid JSON, or a
        supported payload lacks a required field.

    """
    if not event_type:
        raise WebhookPayloadError.missing_event_type()

    struct_type = _EVENT_TYPES.get(event_type)
    try:
        if struct_type is None:
            other = msgspec.json.decode(payload, type=_AnyAction)
            return UnsupportedEvent(event_type=event_type, action=other.action)
        return msgspec.json.decode(payload, type=struct_type)
    except msgspec.DecodeError as exc:
        raise WebhookPayloadError.invalid(event_type, exc) from exc
