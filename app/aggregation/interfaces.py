"""Typed interfaces for aggregation-layer responsibilities."""

from typing import Mapping, Protocol

from app.domain import FetchError, PeopleResponseEnvelope, PlanetDetails


class PlanetResolverPort(Protocol):
    """Port definition for resolving planet locators into planet details."""

    async def resolver_resolve_planet(self, planet_url: str) -> PlanetDetails | FetchError:
        """Resolve one planet locator.

        Args:
            planet_url: Absolute planet resource URL.

        Returns:
            PlanetDetails | FetchError: Normalized planet or typed failure value.

        Raises:
            asyncio.CancelledError: Raised when the awaiting task is cancelled.
        """


class PeopleQueryPort(Protocol):
    """Port definition for the paginated people query."""

    async def aggregator_get_people(
        self,
        query_parameters: Mapping[str, str],
    ) -> PeopleResponseEnvelope | FetchError:
        """Return one enriched people page.

        Args:
            query_parameters: Page query parameters forwarded to the upstream list endpoint.

        Returns:
            PeopleResponseEnvelope | FetchError: Response envelope or typed failure value.

        Raises:
            asyncio.CancelledError: Raised when the awaiting task is cancelled.
        """
