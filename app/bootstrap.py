"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from app.adapters import SwapiHttpClient, UpstreamClientConfig
from app.aggregation import PeopleAggregator, PeopleAggregatorConfig, PlanetResolver
from app.api import create_api_application
from app.config import AppSettings, config_load_settings


def bootstrap_create_upstream_client(settings: AppSettings) -> SwapiHttpClient:
    """Build SWAPI adapter from validated settings.

    Args:
        settings: Validated runtime settings.

    Returns:
        SwapiHttpClient: Upstream adapter bound to the configured base URL.

    Raises:
        ValueError: Raised when upstream config values are invalid.
    """

    return SwapiHttpClient(
        config=UpstreamClientConfig(
            base_url=settings.swapi_url,
            timeout_seconds=settings.upstream_timeout_seconds,
            user_agent=settings.upstream_user_agent,
        )
    )


def bootstrap_create_people_aggregator(
    settings: AppSettings,
    upstream_client: SwapiHttpClient | None = None,
) -> PeopleAggregator:
    """Build people aggregator for HTTP and non-HTTP trigger surfaces.

    Args:
        settings: Validated runtime settings.
        upstream_client: Optional prebuilt adapter shared with other consumers.

    Returns:
        PeopleAggregator: Fully wired people aggregator instance.

    Raises:
        ValueError: Raised when config values are invalid.
    """

    resolved_upstream_client = upstream_client or bootstrap_create_upstream_client(settings)
    return PeopleAggregator(
        upstream_client=resolved_upstream_client,
        planet_resolver=PlanetResolver(upstream_client=resolved_upstream_client),
        config=PeopleAggregatorConfig(max_concurrency=settings.upstream_max_concurrency),
    )


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    upstream_client = bootstrap_create_upstream_client(resolved_settings)
    people_aggregator = bootstrap_create_people_aggregator(resolved_settings, upstream_client=upstream_client)
    return create_api_application(
        settings=resolved_settings,
        upstream_client=upstream_client,
        people_aggregator=people_aggregator,
    )
