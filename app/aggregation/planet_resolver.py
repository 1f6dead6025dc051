"""Planet lookup used to enrich people with homeworld data."""

from __future__ import annotations

from pydantic import ValidationError

from app.adapters import UpstreamClientPort
from app.domain import (
    FetchError,
    PlanetDetails,
    domain_extract_result_properties,
    domain_format_validation_error,
    domain_shape_mismatch_error,
)

from .interfaces import PlanetResolverPort


class PlanetResolver(PlanetResolverPort):
    """Resolve planet URLs into `PlanetDetails` through the upstream client.

    Every call fetches; nothing is cached between calls or requests.
    """

    def __init__(self, upstream_client: UpstreamClientPort):
        """Initialize resolver.

        Args:
            upstream_client: Adapter used for planet detail fetches.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when upstream_client is None.
        """

        if upstream_client is None:
            raise ValueError("upstream_client must not be None")
        self._upstream_client = upstream_client

    async def resolver_resolve_planet(self, planet_url: str) -> PlanetDetails | FetchError:
        """Fetch one planet and keep exactly its `name` and `terrain`.

        Args:
            planet_url: Absolute planet resource URL.

        Returns:
            PlanetDetails | FetchError: Planet details, or a failure when the fetch
            fails or either field is missing or not a string.

        Raises:
            asyncio.CancelledError: Raised when the awaiting task is cancelled.
        """

        payload = await self._upstream_client.adapter_fetch_json(url=planet_url)
        if isinstance(payload, FetchError):
            return payload

        properties = domain_extract_result_properties(payload, source_url=planet_url)
        if isinstance(properties, FetchError):
            return properties

        try:
            return PlanetDetails.model_validate(
                {"name": properties.get("name"), "terrain": properties.get("terrain")}
            )
        except ValidationError as error:
            return domain_shape_mismatch_error(
                f"planet payload is incomplete: {domain_format_validation_error(error)}",
                source_url=planet_url,
            )
