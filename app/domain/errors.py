"""Typed failure values returned by the fetch, resolve and validation layers.

Failures travel as `FetchError` values rather than exceptions. The `kind`
discriminates the cause; the derived `classification` is what the HTTP
boundary uses to choose between 502 and 500.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class FetchErrorKind(str, Enum):
    """Known failure causes inside the aggregation pipeline."""

    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    SHAPE_MISMATCH = "shape_mismatch"
    VALIDATION = "validation"


class ErrorClassification(str, Enum):
    """Two-level classification exposed to callers."""

    BAD_GATEWAY = "bad_gateway"
    INTERNAL = "internal"


FETCH_ERROR_CLASSIFICATIONS: Final[dict[FetchErrorKind, ErrorClassification]] = {
    FetchErrorKind.UPSTREAM_UNAVAILABLE: ErrorClassification.BAD_GATEWAY,
    FetchErrorKind.SHAPE_MISMATCH: ErrorClassification.BAD_GATEWAY,
    FetchErrorKind.VALIDATION: ErrorClassification.INTERNAL,
}

FETCH_ERROR_CODES: Final[dict[FetchErrorKind, str]] = {
    FetchErrorKind.UPSTREAM_UNAVAILABLE: "UPSTREAM_FETCH_FAILED",
    FetchErrorKind.SHAPE_MISMATCH: "UPSTREAM_SHAPE_MISMATCH",
    FetchErrorKind.VALIDATION: "RECORD_VALIDATION_FAILED",
}


@dataclass(frozen=True)
class FetchError:
    """One failure produced while building a people response.

    Attributes:
        kind: Discriminated failure cause.
        message: Human-readable failure message.
        source_url: Upstream URL that triggered the failure, when known.
    """

    kind: FetchErrorKind
    message: str
    source_url: str | None = None

    @property
    def classification(self) -> ErrorClassification:
        """Return the caller-facing classification for this failure.

        Returns:
            ErrorClassification: `BAD_GATEWAY` for upstream-side failures, else `INTERNAL`.

        Raises:
            KeyError: Raised when kind has no registered classification.
        """

        return FETCH_ERROR_CLASSIFICATIONS[self.kind]

    @property
    def error_code(self) -> str:
        """Return stable machine-readable error code for response payloads."""

        return FETCH_ERROR_CODES[self.kind]


def domain_upstream_error(message: str, source_url: str | None = None) -> FetchError:
    """Build an upstream connectivity failure."""

    return FetchError(kind=FetchErrorKind.UPSTREAM_UNAVAILABLE, message=message, source_url=source_url)


def domain_shape_mismatch_error(message: str, source_url: str | None = None) -> FetchError:
    """Build an upstream payload shape failure."""

    return FetchError(kind=FetchErrorKind.SHAPE_MISMATCH, message=message, source_url=source_url)


def domain_validation_error(message: str, source_url: str | None = None) -> FetchError:
    """Build an assembled-record validation failure."""

    return FetchError(kind=FetchErrorKind.VALIDATION, message=message, source_url=source_url)
