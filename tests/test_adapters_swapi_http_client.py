"""Regression tests for SWAPI HTTP adapter decoding and error classification."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.adapters import SwapiHttpClient, UpstreamClientConfig
from app.domain import ErrorClassification, FetchError, FetchErrorKind


def _build_client(handler) -> SwapiHttpClient:
    """Create adapter backed by an in-process mock transport.

    Args:
        handler: Callable receiving `httpx.Request` and returning `httpx.Response`.

    Returns:
        SwapiHttpClient: Adapter with mock transport.

    Raises:
        ValueError: Raised by adapter when config is invalid.
    """

    return SwapiHttpClient(
        config=UpstreamClientConfig(base_url="https://swapi.test/api/", timeout_seconds=5.0, user_agent="test-agent"),
        transport=httpx.MockTransport(handler),
    )


def test_adapters_swapi_returns_decoded_object_and_forwards_params() -> None:
    """Return decoded JSON object and forward query parameters unchanged.

    Returns:
        None: Assertions validate decoded payload and outgoing request.

    Raises:
        AssertionError: Raised when payload or request differ.
    """

    captured_requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        return httpx.Response(200, json={"total_records": 82, "total_pages": 9, "results": []})

    client = _build_client(_handler)

    payload = asyncio.run(
        client.adapter_fetch_json(url=client.adapter_resource_url("people"), query_parameters={"page": "2", "limit": "10"})
    )

    assert payload == {"total_records": 82, "total_pages": 9, "results": []}
    assert len(captured_requests) == 1
    assert captured_requests[0].method == "GET"
    assert captured_requests[0].url.path == "/api/people"
    assert dict(captured_requests[0].url.params) == {"page": "2", "limit": "10"}
    assert captured_requests[0].headers["User-Agent"] == "test-agent"


def test_adapters_swapi_omits_query_string_without_params() -> None:
    """Send detail URLs without an added query string."""

    captured_urls: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        captured_urls.append(str(request.url))
        return httpx.Response(200, json={"result": {"properties": {}}})

    asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people/1"))

    assert captured_urls == ["https://swapi.test/api/people/1"]


@pytest.mark.parametrize("status_code", [302, 304, 404, 500, 503])
def test_adapters_swapi_non_success_status_is_upstream_failure(status_code: int) -> None:
    """Map every non-2xx final status, redirects included, to bad gateway upstream failure.

    Args:
        status_code: Upstream HTTP status.

    Returns:
        None: Assertions validate failure mapping.

    Raises:
        AssertionError: Raised when status is not mapped to upstream failure.
    """

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"message": "nope"})

    outcome = asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people"))

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.UPSTREAM_UNAVAILABLE
    assert outcome.classification == ErrorClassification.BAD_GATEWAY
    assert f"HTTP {status_code}" in outcome.message
    assert outcome.source_url == "https://swapi.test/api/people"


def test_adapters_swapi_transport_error_is_upstream_failure() -> None:
    """Map connection failures to upstream failure."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    outcome = asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people"))

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.UPSTREAM_UNAVAILABLE
    assert "ConnectError" in outcome.message


def test_adapters_swapi_timeout_is_upstream_failure() -> None:
    """Map timeouts to upstream failure with timeout message."""

    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    outcome = asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people"))

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.UPSTREAM_UNAVAILABLE
    assert outcome.message == "SWAPI request timed out"


def test_adapters_swapi_undecodable_body_is_upstream_failure() -> None:
    """Map non-JSON bodies to upstream failure."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>maintenance</html>", headers={"Content-Type": "text/html"})

    outcome = asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people"))

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.UPSTREAM_UNAVAILABLE
    assert "not valid JSON" in outcome.message


def test_adapters_swapi_non_object_json_is_shape_mismatch() -> None:
    """Map JSON arrays to shape mismatch, distinct from connectivity failure."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"name": "Luke Skywalker"}])

    outcome = asyncio.run(_build_client(_handler).adapter_fetch_json(url="https://swapi.test/api/people"))

    assert isinstance(outcome, FetchError)
    assert outcome.kind == FetchErrorKind.SHAPE_MISMATCH
    assert outcome.error_code == "UPSTREAM_SHAPE_MISMATCH"


def test_adapters_swapi_resource_url_joins_base_and_path() -> None:
    client = _build_client(lambda request: httpx.Response(200, json={}))

    assert client.adapter_base_url() == "https://swapi.test/api"
    assert client.adapter_resource_url("people") == "https://swapi.test/api/people"
    assert client.adapter_resource_url("/planets/1/") == "https://swapi.test/api/planets/1"
    with pytest.raises(ValueError, match="resource_path"):
        client.adapter_resource_url("  ")


@pytest.mark.parametrize(
    ("config", "message"),
    [
        (UpstreamClientConfig(base_url=" "), "base_url must not be blank"),
        (UpstreamClientConfig(base_url="swapi.tech/api"), "absolute"),
        (UpstreamClientConfig(base_url="https://swapi.test/api", timeout_seconds=0), "timeout_seconds"),
        (UpstreamClientConfig(base_url="https://swapi.test/api", user_agent=""), "user_agent"),
    ],
)
def test_adapters_swapi_rejects_invalid_config(config: UpstreamClientConfig, message: str) -> None:
    """Raise ValueError for invalid construction config.

    Args:
        config: Invalid adapter config.
        message: Expected error message fragment.

    Returns:
        None: Assertions validate constructor guards.

    Raises:
        AssertionError: Raised when invalid config is accepted.
    """

    with pytest.raises(ValueError, match=message):
        SwapiHttpClient(config=config)
