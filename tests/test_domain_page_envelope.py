"""Tests for upstream page and detail payload normalization."""

from __future__ import annotations

import pytest

from app.domain import (
    FetchError,
    FetchErrorKind,
    PageEnvelope,
    PersonSummary,
    domain_extract_result_properties,
    domain_normalize_page_envelope,
)


def test_domain_page_envelope_normalizes_list_form() -> None:
    """Normalize `results` list form with counters.

    Returns:
        None: Assertions validate normalized envelope.

    Raises:
        AssertionError: Raised when normalization output differs.
    """

    envelope = domain_normalize_page_envelope(
        {
            "message": "ok",
            "total_records": 82,
            "total_pages": 9,
            "previous": None,
            "next": "https://www.swapi.tech/api/people?page=2&limit=10",
            "results": [
                {"uid": "1", "name": "Luke Skywalker", "url": "https://www.swapi.tech/api/people/1"},
                {"uid": "2", "name": "C-3PO", "url": "https://www.swapi.tech/api/people/2"},
            ],
        }
    )

    assert envelope == PageEnvelope(
        total_records=82,
        total_pages=9,
        entries=(
            PersonSummary(url="https://www.swapi.tech/api/people/1"),
            PersonSummary(url="https://www.swapi.tech/api/people/2"),
        ),
    )
    assert not envelope.entries[0].has_embedded_details


def test_domain_page_envelope_falls_back_to_result_with_embedded_properties() -> None:
    """Use `result` when `results` is absent and keep embedded properties."""

    properties = {"name": "Luke Skywalker", "birth_year": "19BBY", "homeworld": "https://www.swapi.tech/api/planets/1"}

    envelope = domain_normalize_page_envelope({"message": "ok", "result": [{"uid": "1", "properties": properties}]})

    assert isinstance(envelope, PageEnvelope)
    assert envelope.total_pages == 1
    assert envelope.total_records == 0
    assert envelope.entries == (PersonSummary(url=None, properties=properties),)
    assert envelope.entries[0].has_embedded_details


def test_domain_page_envelope_prefers_results_over_result() -> None:
    envelope = domain_normalize_page_envelope(
        {"results": [{"url": "https://swapi.test/api/people/1"}], "result": [{"url": "https://swapi.test/api/people/9"}]}
    )

    assert isinstance(envelope, PageEnvelope)
    assert envelope.entries == (PersonSummary(url="https://swapi.test/api/people/1"),)


def test_domain_page_envelope_wraps_single_result_object() -> None:
    """Treat a single `result` object as one-entry page."""

    envelope = domain_normalize_page_envelope(
        {"result": {"properties": {"name": "Luke Skywalker"}, "uid": "1"}}
    )

    assert isinstance(envelope, PageEnvelope)
    assert len(envelope.entries) == 1
    assert envelope.entries[0].properties == {"name": "Luke Skywalker"}


def test_domain_page_envelope_empty_properties_require_url() -> None:
    """Treat empty embedded properties as not embedded."""

    envelope = domain_normalize_page_envelope({"results": [{"properties": {}, "url": "https://swapi.test/api/people/1"}]})

    assert isinstance(envelope, PageEnvelope)
    assert envelope.entries == (PersonSummary(url="https://swapi.test/api/people/1"),)


@pytest.mark.parametrize(
    ("total_records", "total_pages", "expected"),
    [
        (None, None, (0, 1)),
        (0, 0, (0, 1)),
        ("82", "9", (82, 9)),
        (-3, -1, (0, 1)),
        (True, False, (0, 1)),
        ("many", 2.5, (0, 1)),
        ("²", "²", (0, 1)),
        ("\u0663", "\u0663", (0, 1)),
        (" 82 ", " 9 ", (82, 9)),
        ("9" * 5000, "9" * 5000, (0, 1)),
        (82.0, 9.0, (82, 9)),
        (-1.0, 0.0, (0, 1)),
    ],
)
def test_domain_page_envelope_counter_defaults(
    total_records: object,
    total_pages: object,
    expected: tuple[int, int],
) -> None:
    """Apply lenient counter defaults for absent or unusable values.

    Args:
        total_records: Raw upstream record counter.
        total_pages: Raw upstream page counter.
        expected: Expected `(total_records, total_pages)`.

    Returns:
        None: Assertions validate counter normalization.

    Raises:
        AssertionError: Raised when counters differ.
    """

    envelope = domain_normalize_page_envelope(
        {"results": [], "total_records": total_records, "total_pages": total_pages}
    )

    assert isinstance(envelope, PageEnvelope)
    assert (envelope.total_records, envelope.total_pages) == expected


@pytest.mark.parametrize(
    "payload",
    [
        {"message": "ok"},
        {"results": "Luke"},
        {"results": ["https://swapi.test/api/people/1"]},
        {"results": [{"uid": "1", "name": "Luke Skywalker"}]},
        {"results": [{"url": "   "}]},
    ],
)
def test_domain_page_envelope_malformed_pages_are_shape_mismatch(payload: dict[str, object]) -> None:
    """Reject pages whose entries cannot be resolved."""

    outcome = domain_normalize_page_envelope(payload, source_url="https://swapi.test/api/people")

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.SHAPE_MISMATCH
    assert outcome.source_url == "https://swapi.test/api/people"


def test_domain_extract_result_properties_returns_copy() -> None:
    properties = {"name": "Tatooine", "terrain": "desert"}
    payload = {"result": {"properties": properties}}

    extracted = domain_extract_result_properties(payload)

    assert extracted == properties
    assert extracted is not properties


@pytest.mark.parametrize("payload", [{}, {"result": None}, {"result": []}, {"result": {"properties": "x"}}])
def test_domain_extract_result_properties_rejects_missing_shape(payload: dict[str, object]) -> None:
    outcome = domain_extract_result_properties(payload, source_url="https://swapi.test/api/planets/1")

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.SHAPE_MISMATCH
