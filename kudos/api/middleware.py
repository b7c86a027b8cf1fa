"""CORS preflight middleware for the Kudos API.

Every ``OPTIONS`` request to a registered route is answered directly with
``204 No Content`` and a fixed set of CORS headers; the resource responder
never runs. ``OPTIONS`` to an unknown path still falls through to 404.

Usage
-----
Register the middleware when creating the Falcon app::

    app = falcon.asgi.App(middleware=[CORSPreflightMiddleware()])

"""

from __future__ import annotations

import typing as typ

import falcon

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

__all__ = ["CORS_HEADERS", "CORSPreflightMiddleware"]

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "X-Requested-With",
    "Access-Control-Allow-Methods": "POST, GET, PUT, DELETE, OPTIONS",
}


class CORSPreflightMiddleware:
    """Falcon middleware answering preflight requests for routed resources."""

    async def process_resource(
        self,
        req: Request,
        resp: Response,
        resource: object,
        _params: dict[str, typ.Any],
    ) -> None:
        """Short-circuit ``OPTIONS`` with 204 and the CORS headers.

        Parameters
        ----------
        req
            Falcon request whose method is inspected.
        resp
            Falcon response receiving the headers and status.
        resource
            The matched resource, or ``None`` when no route matched.
        _params
            URI template parameters (unused).

        """
        if req.method != "OPTIONS" or resource is None:
            return

        resp.set_headers(CORS_HEADERS)
        resp.status = falcon.HTTP_204
        resp.complete = True
