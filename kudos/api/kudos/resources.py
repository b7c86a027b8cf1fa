"""Read resource listing a user's kudos.

``GET /api/kudos/{user}`` returns the user's contribution records as a JSON
array, ``[]`` when the user has none.
"""

from __future__ import annotations

import asyncio
import typing as typ

import falcon
import msgspec

from kudos.contributions.observability import ContributionEventLogger

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from kudos.store.client import KudosStore

__all__ = ["KudosResource"]


class KudosResource:
    """Resource serving the kudos recorded for one GitHub user."""

    def __init__(
        self,
        store: KudosStore,
        *,
        event_logger: ContributionEventLogger | None = None,
    ) -> None:
        """Configure the resource with the shared store."""
        self._store = store
        self._event_logger = event_logger or ContributionEventLogger()

    async def on_get(self, _req: Request, resp: Response, *, user: str) -> None:
        """Handle GET request listing kudos for ``user``.

        Parameters
        ----------
        _req
            Falcon request (unused).
        resp
            Falcon response receiving the JSON array.
        user
            GitHub login from the URL path.

        """
        records = await asyncio.to_thread(self._store.list_by_user, user)
        self._event_logger.log_kudos_listed(user=user, count=len(records))

        resp.data = msgspec.json.encode(records)
        resp.content_type = falcon.MEDIA_JSON
        resp.status = falcon.HTTP_200
