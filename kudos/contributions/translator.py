"""Translate webhook events into contribution records.

``translate_event`` is pure: it never touches the store. The caller decides
what to do with each outcome:

- ``ContributionRecord``: write it and respond 201.
- ``Skip``: a supported event with an action other than ``opened``.
- ``Ignore``: an event type that never yields a contribution.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from kudos.common.time import to_epoch_seconds
from kudos.github.events import (
    ISSUES_EVENT,
    PULL_REQUEST_EVENT,
    IssuesEvent,
    PullRequestEvent,
    UnsupportedEvent,
)
from kudos.store.models import ContributionRecord, ContributionType

if typ.TYPE_CHECKING:
    from kudos.github.events import WebhookEvent

__all__ = ["OPENED_ACTION", "Ignore", "Skip", "TranslationOutcome", "translate_event"]

OPENED_ACTION = "opened"


@dc.dataclass(frozen=True, slots=True)
class Skip:
    """A supported event whose action does not record a contribution."""

    event_type: str
    action: str


@dc.dataclass(frozen=True, slots=True)
class Ignore:
    """An event type the service does not record."""

    event_type: str


TranslationOutcome: typ.TypeAlias = ContributionRecord | Skip | Ignore


def translate_event(event: WebhookEvent) -> TranslationOutcome:
    """Map a parsed webhook event onto a record, ``Skip`` or ``Ignore``.

    No field is validated beyond what parsing already enforced; empty titles
    or URLs pass through unchanged.
    """
    match event:
        case PullRequestEvent(action=action) if action != OPENED_ACTION:
            return Skip(event_type=PULL_REQUEST_EVENT, action=action)
        case IssuesEvent(action=action) if action != OPENED_ACTION:
            return Skip(event_type=ISSUES_EVENT, action=action)
        case PullRequestEvent(pull_request=pr):
            return ContributionRecord(
                user=pr.user.login,
                time=to_epoch_seconds(pr.created_at),
                contribution_type=ContributionType.PULL_REQUEST,
                contribution_url=pr.url,
                contribution_name=pr.title,
            )
        case IssuesEvent(issue=issue):
            return ContributionRecord(
                user=issue.user.login,
                time=to_epoch_seconds(issue.created_at),
                contribution_type=ContributionType.ISSUE,
                contribution_url=issue.url,
                contribution_name=issue.title,
            )
        case UnsupportedEvent(event_type=event_type):
            return Ignore(event_type=event_type)
        case _:
            typ.assert_never(event)
