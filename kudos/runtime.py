"""Kudos runtime entrypoint.

``create_app`` builds the Falcon ASGI application from the environment and
is the stable ``kudos.runtime:create_app`` factory used by Granian. The
DynamoDB store is constructed once here and shared by every request.

Configuration is driven by environment variables:

- ``KUDOS_HOST``: Bind address (default ``0.0.0.0``)
- ``KUDOS_PORT``: Listen port (default ``80``)
- ``KUDOS_LOG_LEVEL``: Log level (default ``INFO``)
- everything read by :meth:`kudos.config.KudosConfig.from_env`

Run the service directly with ``python -m kudos.runtime``.
"""

from __future__ import annotations

import os
import typing as typ

from kudos.api.app import AppDependencies
from kudos.api.app import create_app as _create_api_app
from kudos.config import KudosConfig
from kudos.logging import (
    configure_logging,
    get_logger,
    log_error,
    log_info,
    log_warning,
)
from kudos.store.client import KudosStore

if typ.TYPE_CHECKING:
    import falcon.asgi

__all__ = ["create_app", "main"]

logger = get_logger(__name__)

# TCP port number range limits
_MIN_PORT = 1
_MAX_PORT = 65535


def _parse_port(port_str: str) -> int:
    """Parse and validate a port number string.

    Raises
    ------
    SystemExit
        If port_str is not a valid integer in range 1-65535.

    """
    try:
        port = int(port_str)
        if not (_MIN_PORT <= port <= _MAX_PORT):
            msg = f"port {port} outside valid range {_MIN_PORT}-{_MAX_PORT}"
            raise ValueError(msg)  # noqa: TRY301 - unify conversion and range errors
    except ValueError as exc:
        log_error(
            logger,
            "Invalid KUDOS_PORT value: %r (must be %d-%d): %s",
            port_str,
            _MIN_PORT,
            _MAX_PORT,
            exc,
        )
        raise SystemExit(1) from exc
    return port


def create_app(config: KudosConfig | None = None) -> falcon.asgi.App:
    """Create the Falcon ASGI application from configuration.

    Parameters
    ----------
    config
        Service configuration; read from the environment when ``None``.

    Returns
    -------
    falcon.asgi.App
        Configured Falcon ASGI application.

    """
    config = config or KudosConfig.from_env()
    if not config.validates_signatures:
        log_warning(
            logger,
            "KUDOS_WEBHOOK_SECRET is not set; webhook signatures are not validated",
        )

    store = KudosStore.from_config(config)
    log_info(logger, "Recording kudos in DynamoDB table %s", store.table_name)

    return _create_api_app(
        AppDependencies(store=store, webhook_secret=config.webhook_secret)
    )


def main() -> None:
    """Start the Kudos service using Granian.

    Reads ``KUDOS_HOST``, ``KUDOS_PORT`` and ``KUDOS_LOG_LEVEL`` from the
    environment and serves ``kudos.runtime:create_app``.
    """
    from granian import Granian
    from granian.constants import Interfaces

    host = os.environ.get("KUDOS_HOST", "0.0.0.0")  # noqa: S104 - bind all interfaces for container
    port = _parse_port(os.environ.get("KUDOS_PORT", "80"))
    log_level_str = os.environ.get("KUDOS_LOG_LEVEL", "INFO")

    normalized_level, invalid_level = configure_logging(log_level_str)
    if invalid_level:
        log_warning(
            logger,
            "Invalid KUDOS_LOG_LEVEL %r, falling back to %s",
            log_level_str,
            normalized_level,
        )

    log_info(
        logger,
        "Starting Kudos on %s:%d (log_level=%s)",
        host,
        port,
        normalized_level,
    )

    server = Granian(
        "kudos.runtime:create_app",
        address=host,
        port=port,
        interface=Interfaces.ASGI,
        factory=True,
    )
    server.serve()


if __name__ == "__main__":
    main()
