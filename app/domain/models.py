"""Typed domain models shared across runtime layers.

Output records are pydantic models with strict string fields so that assembly and
validation share one declaration of the response contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        environment_name: Runtime environment label.
    """

    application_name: str
    environment_name: str


@dataclass(frozen=True)
class PersonSummary:
    """One normalized entry of an upstream people page.

    The upstream list endpoint returns either reference entries carrying a
    detail `url`, or entries that already embed full `properties`.

    Attributes:
        url: Detail resource locator, `None` only when details are embedded.
        properties: Embedded person details or `None`.
    """

    url: str | None
    properties: dict[str, Any] | None = None

    @property
    def has_embedded_details(self) -> bool:
        """Return whether the entry can skip its detail fetch."""

        return self.properties is not None


@dataclass(frozen=True)
class PageEnvelope:
    """Normalized upstream people page.

    Attributes:
        total_records: Upstream-reported record count, `0` when absent.
        total_pages: Upstream-reported page count, `1` when absent.
        entries: Page entries in upstream order.
    """

    total_records: int
    total_pages: int
    entries: tuple[PersonSummary, ...]


class PlanetDetails(BaseModel):
    """Normalized planet data used to enrich a person."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    terrain: StrictStr


class HomeworldRecord(BaseModel):
    """Homeworld section of an output person record."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    terrain: StrictStr


class PersonRecord(BaseModel):
    """Output person record returned to API consumers."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: StrictStr
    birth_year: StrictStr
    homeworld: HomeworldRecord


class PeopleResponseEnvelope(BaseModel):
    """Paginated people response envelope.

    Field aliases keep the camelCase wire contract consumed by the display client.
    """

    model_config = ConfigDict(frozen=True)

    data: list[PersonRecord]
    total_records: int = Field(serialization_alias="totalRecords", ge=0)
    total_pages: int = Field(serialization_alias="totalPages", ge=1)

    def envelope_to_payload(self) -> dict[str, Any]:
        """Return JSON-ready payload using wire field names.

        Returns:
            dict[str, Any]: Envelope with `data`, `totalRecords` and `totalPages` keys.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.model_dump(mode="json", by_alias=True)
