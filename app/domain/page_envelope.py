"""Normalization of loosely-typed upstream SWAPI payloads.

The upstream people endpoint answers in two shapes:

    list form    {"total_records": 82, "total_pages": 9, "results": [{"uid": "1", "url": "..."}]}
    search form  {"result": [{"properties": {...}}]}

Detail resources wrap their fields as `{"result": {"properties": {...}}}`.
Everything past this module sees only `PageEnvelope` and plain property mappings.
"""

from __future__ import annotations

from typing import Any, Mapping

from .errors import FetchError, domain_shape_mismatch_error
from .models import PageEnvelope, PersonSummary

DEFAULT_TOTAL_PAGES = 1
DEFAULT_TOTAL_RECORDS = 0
COUNTER_MAX_DIGITS = 18


def domain_normalize_page_envelope(
    payload: Mapping[str, Any],
    source_url: str | None = None,
) -> PageEnvelope | FetchError:
    """Normalize one upstream people page into a `PageEnvelope`.

    `results` is preferred over `result`. Pagination counters fall back to
    `total_pages=1` and `total_records=0` when absent or unusable.

    Args:
        payload: Decoded upstream page payload.
        source_url: Page URL used for diagnostics.

    Returns:
        PageEnvelope | FetchError: Normalized page or shape mismatch failure.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    raw_entries = payload.get("results")
    if raw_entries is None:
        raw_entries = payload.get("result")
    if raw_entries is None:
        return domain_shape_mismatch_error(
            "people page payload has neither `results` nor `result`",
            source_url=source_url,
        )
    if isinstance(raw_entries, Mapping):
        raw_entries = [raw_entries]
    if not isinstance(raw_entries, list):
        return domain_shape_mismatch_error(
            f"people page entries must be a list, got {type(raw_entries).__name__}",
            source_url=source_url,
        )

    entries: list[PersonSummary] = []
    for entry_index, raw_entry in enumerate(raw_entries):
        entry = _domain_normalize_page_entry(raw_entry)
        if entry is None:
            return domain_shape_mismatch_error(
                f"people page entry {entry_index} has neither embedded `properties` nor a detail `url`",
                source_url=source_url,
            )
        entries.append(entry)

    return PageEnvelope(
        total_records=_domain_read_counter(payload.get("total_records"), DEFAULT_TOTAL_RECORDS, minimum=0),
        total_pages=_domain_read_counter(payload.get("total_pages"), DEFAULT_TOTAL_PAGES, minimum=1),
        entries=tuple(entries),
    )


def domain_extract_result_properties(
    payload: Mapping[str, Any],
    source_url: str | None = None,
) -> dict[str, Any] | FetchError:
    """Return the `result.properties` mapping of one SWAPI detail payload.

    Args:
        payload: Decoded upstream detail payload.
        source_url: Detail URL used for diagnostics.

    Returns:
        dict[str, Any] | FetchError: Properties mapping or shape mismatch failure.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    result = payload.get("result")
    if not isinstance(result, Mapping):
        return domain_shape_mismatch_error("detail payload is missing `result` object", source_url=source_url)
    properties = result.get("properties")
    if not isinstance(properties, Mapping):
        return domain_shape_mismatch_error(
            "detail payload is missing `result.properties` object",
            source_url=source_url,
        )
    return dict(properties)


def _domain_normalize_page_entry(raw_entry: Any) -> PersonSummary | None:
    if not isinstance(raw_entry, Mapping):
        return None

    properties = raw_entry.get("properties")
    url = raw_entry.get("url")
    normalized_url = url.strip() if isinstance(url, str) and url.strip() else None
    # empty `properties` counts as not embedded
    if isinstance(properties, Mapping) and properties:
        return PersonSummary(url=normalized_url, properties=dict(properties))
    if normalized_url is None:
        return None
    return PersonSummary(url=normalized_url)


def _domain_read_counter(value: Any, default: int, minimum: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str):
        text = value.strip()
        if len(text) > COUNTER_MAX_DIGITS or not (text.isascii() and text.isdecimal()):
            return default
        value = int(text)
    if not isinstance(value, int) or value < minimum:
        return default
    return value
