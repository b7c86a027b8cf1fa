"""Webhook resource recording GitHub contributions.

``POST /api/contribution/gh`` accepts GitHub ``pull_request`` and ``issues``
deliveries. Opened pull requests and issues are written to the kudos store;
everything else is acknowledged with 202 and no body.

Usage
-----
Register the resource on the Falcon app::

    app.add_route(
        "/api/contribution/gh",
        ContributionWebhookResource(dependencies),
    )

"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ

import falcon

from kudos.api.errors import DELIVERY_HEADER
from kudos.contributions.observability import ContributionEventLogger
from kudos.contributions.translator import Ignore, Skip, translate_event
from kudos.github.events import parse_webhook
from kudos.github.signature import (
    SIGNATURE_HEADER,
    SIGNATURE_SHA256_HEADER,
    extract_payload,
    verify_signature,
)
from kudos.store.models import ContributionRecord

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from kudos.store.client import KudosStore

__all__ = [
    "EVENT_HEADER",
    "ContributionResourceDependencies",
    "ContributionWebhookResource",
]

EVENT_HEADER = "X-GitHub-Event"


@dc.dataclass(frozen=True, slots=True)
class ContributionResourceDependencies:
    """Collaborators for ``ContributionWebhookResource``.

    Attributes
    ----------
    store
        Shared kudos store receiving new records.
    webhook_secret
        Shared secret for signature validation; empty disables the check.
    event_logger
        Structured event logger.

    """

    store: KudosStore
    webhook_secret: str = ""
    event_logger: ContributionEventLogger = dc.field(
        default_factory=ContributionEventLogger
    )


class ContributionWebhookResource:
    """Resource turning opened pull requests and issues into kudos."""

    def __init__(self, dependencies: ContributionResourceDependencies) -> None:
        """Configure the resource with its dependencies."""
        self._store = dependencies.store
        self._webhook_secret = dependencies.webhook_secret
        self._event_logger = dependencies.event_logger

    async def on_post(self, req: Request, resp: Response) -> None:
        """Handle a GitHub webhook delivery.

        The signature is checked against the raw body before anything is
        parsed, so a forged delivery never reaches the store.

        Parameters
        ----------
        req
            Falcon request carrying the delivery.
        resp
            Falcon response; 201 when a record is written, 202 otherwise.

        Raises
        ------
        WebhookSignatureError
            Mapped to 401 by the registered error handler.
        WebhookPayloadError
            Mapped to 400.
        StoreError
            Mapped to 500.

        """
        body = await req.stream.read()
        verify_signature(
            body,
            self._webhook_secret,
            {
                SIGNATURE_SHA256_HEADER: req.get_header(SIGNATURE_SHA256_HEADER),
                SIGNATURE_HEADER: req.get_header(SIGNATURE_HEADER),
            },
        )
        payload = extract_payload(body, req.content_type)
        event = parse_webhook(req.get_header(EVENT_HEADER), payload)
        delivery_id = req.get_header(DELIVERY_HEADER)

        match translate_event(event):
            case Skip(event_type=event_type, action=action):
                self._event_logger.log_contribution_skipped(
                    event_type=event_type,
                    action=action,
                    delivery_id=delivery_id,
                )
                resp.status = falcon.HTTP_202
            case Ignore(event_type=event_type):
                self._event_logger.log_event_ignored(
                    event_type=event_type,
                    delivery_id=delivery_id,
                )
                resp.status = falcon.HTTP_202
            case ContributionRecord() as record:
                await asyncio.to_thread(self._store.create, record)
                self._event_logger.log_contribution_recorded(
                    record,
                    delivery_id=delivery_id,
                )
                resp.status = falcon.HTTP_201
