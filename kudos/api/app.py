"""Application factory for the Kudos Falcon ASGI application.

Routes
------
``POST /api/contribution/gh``
    GitHub webhook intake.
``GET /api/kudos/{user}``
    Kudos recorded for one user.
``GET /``
    Health check.

Usage
-----
Build the app around one store shared by every request::

    from kudos.api.app import AppDependencies, create_app
    from kudos.store import KudosStore

    deps = AppDependencies(
        store=KudosStore.from_config(config),
        webhook_secret=config.webhook_secret,
    )
    app = create_app(deps)

"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import falcon.asgi

from kudos.api.contributions.resources import (
    ContributionResourceDependencies,
    ContributionWebhookResource,
)
from kudos.api.errors import register_error_handlers
from kudos.api.health.resources import HealthResource
from kudos.api.kudos.resources import KudosResource
from kudos.api.middleware import CORSPreflightMiddleware
from kudos.contributions.observability import ContributionEventLogger

if typ.TYPE_CHECKING:
    from kudos.store.client import KudosStore

__all__ = ["AppDependencies", "create_app"]


@dc.dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependencies for the Falcon ASGI application.

    Attributes
    ----------
    store
        Kudos store shared read-only by all requests.
    webhook_secret
        GitHub webhook shared secret. Empty disables signature checks.
    event_logger
        Structured event logger shared by the resources.

    """

    store: KudosStore
    webhook_secret: str = ""
    event_logger: ContributionEventLogger = dc.field(
        default_factory=ContributionEventLogger
    )


def create_app(dependencies: AppDependencies) -> falcon.asgi.App:
    """Create and configure the Falcon ASGI application.

    Parameters
    ----------
    dependencies
        Store, webhook secret and event logger for the resources.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    app = falcon.asgi.App(middleware=[CORSPreflightMiddleware()])  # type: ignore[no-matching-overload]  # Falcon stubs

    app.add_route(
        "/api/contribution/gh",
        ContributionWebhookResource(
            ContributionResourceDependencies(
                store=dependencies.store,
                webhook_secret=dependencies.webhook_secret,
                event_logger=dependencies.event_logger,
            )
        ),
    )
    app.add_route(
        "/api/kudos/{user}",
        KudosResource(dependencies.store, event_logger=dependencies.event_logger),
    )
    app.add_route("/", HealthResource())

    register_error_handlers(app)

    return app
