"""Health check resource served at the API root.

The resource is stateless and never touches DynamoDB, so it answers even
when the store is unreachable.
"""

from __future__ import annotations

import typing as typ
from http import HTTPStatus

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["HealthResource"]


class HealthResource:
    """Liveness probe responding 200 with an empty body."""

    async def on_get(self, _req: Request, resp: Response) -> None:
        """Handle GET / requests."""
        resp.status = HTTPStatus.OK
