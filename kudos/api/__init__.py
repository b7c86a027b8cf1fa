"""Kudos HTTP API layer.

This package provides the Falcon Asynchronous Server Gateway Interface
(ASGI) application exposing the webhook intake, the kudos listing and the
health check.

Usage
-----
Create the application around a shared store::

    from kudos.api import AppDependencies, create_app

    app = create_app(AppDependencies(store=store, webhook_secret=secret))

Public API
----------
AppDependencies
    Collaborators shared by every request.
create_app
    Application factory registering routes, CORS middleware and error
    handlers.
"""

from kudos.api.app import AppDependencies, create_app

__all__ = ["AppDependencies", "create_app"]
