"""People page aggregation: page fetch, per-record enrichment fan-out and ordered join."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from app.adapters import UpstreamClientPort
from app.domain import (
    FetchError,
    PeopleResponseEnvelope,
    PersonRecord,
    PersonSummary,
    domain_extract_result_properties,
    domain_normalize_page_envelope,
    domain_validate_person_record,
    domain_validation_error,
)

from .interfaces import PeopleQueryPort, PlanetResolverPort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PeopleAggregatorConfig:
    """Aggregator runtime configuration.

    Attributes:
        people_resource: Upstream list resource path relative to the client base URL.
        max_concurrency: Maximum number of entries resolved at the same time per request.
    """

    people_resource: str = "people"
    max_concurrency: int = 10


class PeopleAggregator(PeopleQueryPort):
    """Build enriched people pages from the upstream people and planets resources.

    Any single failure (page, detail, planet or validation) fails the whole
    request; remaining entry tasks are cancelled and no partial page is returned.
    """

    def __init__(
        self,
        upstream_client: UpstreamClientPort,
        planet_resolver: PlanetResolverPort,
        config: PeopleAggregatorConfig | None = None,
    ):
        """Initialize people aggregator.

        Args:
            upstream_client: Adapter used for page and person detail fetches.
            planet_resolver: Resolver used for homeworld lookups.
            config: Optional aggregator configuration.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies or config values are invalid.
        """

        resolved_config = config or PeopleAggregatorConfig()
        if upstream_client is None:
            raise ValueError("upstream_client must not be None")
        if planet_resolver is None:
            raise ValueError("planet_resolver must not be None")
        if resolved_config.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        if not resolved_config.people_resource.strip():
            raise ValueError("people_resource must not be blank")

        self._upstream_client = upstream_client
        self._planet_resolver = planet_resolver
        self._config = resolved_config

    async def aggregator_get_people(
        self,
        query_parameters: Mapping[str, str],
    ) -> PeopleResponseEnvelope | FetchError:
        """Return one enriched people page.

        Args:
            query_parameters: Page query parameters forwarded verbatim to the upstream list endpoint.

        Returns:
            PeopleResponseEnvelope | FetchError: Envelope with records in upstream page order,
            or the first failure encountered.

        Raises:
            asyncio.CancelledError: Raised when the caller cancels; in-flight entry tasks are cancelled first.
        """

        page_url = self._upstream_client.adapter_resource_url(self._config.people_resource)
        page_payload = await self._upstream_client.adapter_fetch_json(
            url=page_url,
            query_parameters=dict(query_parameters),
        )
        if isinstance(page_payload, FetchError):
            return self._aggregator_log_abort(page_payload)

        page_envelope = domain_normalize_page_envelope(page_payload, source_url=page_url)
        if isinstance(page_envelope, FetchError):
            return self._aggregator_log_abort(page_envelope)

        people_records = await self._aggregator_resolve_entries(page_envelope.entries)
        if isinstance(people_records, FetchError):
            return self._aggregator_log_abort(people_records)

        logger.info(
            "people page assembled records=%d total_records=%d total_pages=%d",
            len(people_records),
            page_envelope.total_records,
            page_envelope.total_pages,
        )
        return PeopleResponseEnvelope(
            data=people_records,
            total_records=page_envelope.total_records,
            total_pages=page_envelope.total_pages,
        )

    async def _aggregator_resolve_entries(
        self,
        entries: Sequence[PersonSummary],
    ) -> list[PersonRecord] | FetchError:
        """Resolve all page entries concurrently and join them by original index.

        Args:
            entries: Normalized page entries in upstream order.

        Returns:
            list[PersonRecord] | FetchError: Records in entry order, or the first failure.

        Raises:
            asyncio.CancelledError: Raised when the caller cancels the join.
        """

        resolved_records: list[PersonRecord | None] = [None] * len(entries)
        if not entries:
            return []

        concurrency_limit = asyncio.Semaphore(self._config.max_concurrency)
        pending_tasks: dict[asyncio.Task, int] = {
            asyncio.create_task(self._aggregator_resolve_entry_bounded(entry, concurrency_limit)): entry_index
            for entry_index, entry in enumerate(entries)
        }
        try:
            while pending_tasks:
                done_tasks, _ = await asyncio.wait(pending_tasks.keys(), return_when=asyncio.FIRST_COMPLETED)
                for task in done_tasks:
                    entry_index = pending_tasks.pop(task)
                    outcome = task.result()
                    if isinstance(outcome, FetchError):
                        return outcome
                    resolved_records[entry_index] = outcome
        finally:
            for task in pending_tasks:
                task.cancel()
            if pending_tasks:
                await asyncio.gather(*pending_tasks.keys(), return_exceptions=True)

        return [record for record in resolved_records if record is not None]

    async def _aggregator_resolve_entry_bounded(
        self,
        entry: PersonSummary,
        concurrency_limit: asyncio.Semaphore,
    ) -> PersonRecord | FetchError:
        async with concurrency_limit:
            return await self._aggregator_resolve_entry(entry)

    async def _aggregator_resolve_entry(self, entry: PersonSummary) -> PersonRecord | FetchError:
        """Resolve, enrich and validate one page entry.

        Embedded `properties` are used as-is; otherwise exactly one detail
        fetch is issued to the entry URL.

        Args:
            entry: Normalized page entry.

        Returns:
            PersonRecord | FetchError: Validated record or typed failure value.

        Raises:
            asyncio.CancelledError: Raised when the entry task is cancelled.
        """

        person_details = await self._aggregator_person_details(entry)
        if isinstance(person_details, FetchError):
            return person_details

        homeworld_url = person_details.get("homeworld")
        if not isinstance(homeworld_url, str) or not homeworld_url.strip():
            return domain_validation_error(
                "person record failed validation: homeworld: locator is missing",
                source_url=entry.url,
            )

        planet = await self._planet_resolver.resolver_resolve_planet(homeworld_url.strip())
        if isinstance(planet, FetchError):
            return planet

        candidate = {
            "name": person_details.get("name"),
            "birth_year": person_details.get("birth_year"),
            "homeworld": {"name": planet.name, "terrain": planet.terrain},
        }
        return domain_validate_person_record(candidate, source_url=entry.url)

    async def _aggregator_person_details(self, entry: PersonSummary) -> dict[str, Any] | FetchError:
        if entry.properties is not None:
            return entry.properties

        detail_url = entry.url or ""
        detail_payload = await self._upstream_client.adapter_fetch_json(url=detail_url)
        if isinstance(detail_payload, FetchError):
            return detail_payload
        return domain_extract_result_properties(detail_payload, source_url=detail_url)

    def _aggregator_log_abort(self, failure: FetchError) -> FetchError:
        logger.warning(
            "people request aborted kind=%s code=%s url=%s: %s",
            failure.kind.value,
            failure.error_code,
            failure.source_url,
            failure.message,
        )
        return failure
