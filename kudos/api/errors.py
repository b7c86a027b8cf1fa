"""Falcon error handlers for the Kudos API.

Each domain error is answered with its status code and the error message
as a plain-text body. No structured error payload is returned.

Usage
-----
Register the handlers on the Falcon app::

    from kudos.api.errors import register_error_handlers

    register_error_handlers(app)

"""

from __future__ import annotations

import typing as typ

import falcon

from kudos.contributions.observability import ContributionEventLogger
from kudos.github.errors import WebhookPayloadError, WebhookSignatureError
from kudos.store.errors import StoreError

if typ.TYPE_CHECKING:
    import falcon.asgi
    from falcon.asgi import Request, Response

__all__ = [
    "DELIVERY_HEADER",
    "handle_store_error",
    "handle_webhook_payload_error",
    "handle_webhook_signature_error",
    "register_error_handlers",
]

DELIVERY_HEADER = "X-GitHub-Delivery"

_event_logger = ContributionEventLogger()


def _plain_text(resp: Response, status: str, ex: BaseException) -> None:
    resp.status = status
    resp.content_type = falcon.MEDIA_TEXT
    resp.text = str(ex)


async def handle_webhook_signature_error(
    req: Request,
    resp: Response,
    ex: WebhookSignatureError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``WebhookSignatureError`` to an HTTP 401 plain-text response."""
    _event_logger.log_webhook_rejected(
        delivery_id=req.get_header(DELIVERY_HEADER),
        status=401,
        error=ex,
    )
    _plain_text(resp, falcon.HTTP_401, ex)


async def handle_webhook_payload_error(
    req: Request,
    resp: Response,
    ex: WebhookPayloadError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``WebhookPayloadError`` to an HTTP 400 plain-text response."""
    _event_logger.log_webhook_rejected(
        delivery_id=req.get_header(DELIVERY_HEADER),
        status=400,
        error=ex,
    )
    _plain_text(resp, falcon.HTTP_400, ex)


async def handle_store_error(
    req: Request,
    resp: Response,
    ex: StoreError,
    _params: dict[str, typ.Any],
) -> None:
    """Map ``StoreError`` to an HTTP 500 plain-text response.

    Parameters
    ----------
    req
        Falcon request, used to name the failed operation in the log.
    resp
        Falcon response whose status and body are set.
    ex
        The store failure; its message becomes the response body.
    _params
        URI template parameters (unused).

    """
    _event_logger.log_store_failed(operation=f"{req.method} {req.path}", error=ex)
    _plain_text(resp, falcon.HTTP_500, ex)


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Install every Kudos error handler on ``app``."""
    app.add_error_handler(WebhookSignatureError, handle_webhook_signature_error)
    app.add_error_handler(WebhookPayloadError, handle_webhook_payload_error)
    app.add_error_handler(StoreError, handle_store_error)
