"""Domain models, failure values and normalization used across application layer boundaries."""

from .errors import (
    ErrorClassification,
    FetchError,
    FetchErrorKind,
    domain_shape_mismatch_error,
    domain_upstream_error,
    domain_validation_error,
)
from .models import (
    AppMetadata,
    HomeworldRecord,
    PageEnvelope,
    PeopleResponseEnvelope,
    PersonRecord,
    PersonSummary,
    PlanetDetails,
)
from .page_envelope import domain_extract_result_properties, domain_normalize_page_envelope
from .validation import domain_format_validation_error, domain_validate_person_record

__all__ = [
    "AppMetadata",
    "ErrorClassification",
    "FetchError",
    "FetchErrorKind",
    "HomeworldRecord",
    "PageEnvelope",
    "PeopleResponseEnvelope",
    "PersonRecord",
    "PersonSummary",
    "PlanetDetails",
    "domain_extract_result_properties",
    "domain_format_validation_error",
    "domain_normalize_page_envelope",
    "domain_shape_mismatch_error",
    "domain_upstream_error",
    "domain_validate_person_record",
    "domain_validation_error",
]
