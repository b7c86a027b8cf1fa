"""Health check resource for the API root.

Usage
-----
Import the resource for route registration::

    from kudos.api.health.resources import HealthResource
"""
