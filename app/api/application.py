"""FastAPI application factory for the people proxy service.

This module defines API application composition used by the runtime.
"""

from fastapi import FastAPI

from app.adapters import UpstreamClientPort
from app.aggregation import PeopleQueryPort
from app.config import AppSettings
from app.domain import AppMetadata

from .routers import api_create_health_router, api_create_people_router


def create_api_application(
    settings: AppSettings,
    upstream_client: UpstreamClientPort,
    people_aggregator: PeopleQueryPort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        upstream_client: Upstream adapter reported by health endpoints.
        people_aggregator: People query implementation backing `/api/people`.

    Returns:
        FastAPI: Framework application instance with all routers mounted.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """
    metadata = AppMetadata(application_name="swapi-people-proxy", environment_name=settings.environment_name)
    application = FastAPI(title="SWAPI People Proxy")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return minimal service identification payload.

        Returns:
            dict[str, str]: Service name, status and environment.

        Raises:
            RuntimeError: Raised if route handler cannot produce a response.
        """

        return {
            "service": metadata.application_name,
            "status": "ready",
            "environment": metadata.environment_name,
        }

    application.include_router(api_create_health_router(upstream_client=upstream_client))
    application.include_router(api_create_people_router(people_aggregator=people_aggregator))

    return application
