"""SWAPI HTTP adapter implementation for JSON resource retrieval."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from app.domain import FetchError, domain_shape_mismatch_error, domain_upstream_error

from .interfaces import UpstreamClientConfig, UpstreamClientPort

logger = logging.getLogger(__name__)


class SwapiHttpClient(UpstreamClientPort):
    """Adapter issuing single GET requests against the Star Wars API."""

    def __init__(
        self,
        config: UpstreamClientConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize SWAPI HTTP adapter.

        Args:
            config: Upstream base URL, timeout and header configuration.
            transport: Optional httpx transport override, used by tests.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when required config values are invalid.
        """

        normalized_base_url = config.base_url.strip()
        normalized_user_agent = config.user_agent.strip()

        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if not normalized_base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        if config.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        if not normalized_user_agent:
            raise ValueError("user_agent must not be blank")

        self._base_url = normalized_base_url.rstrip("/")
        self._timeout_seconds = config.timeout_seconds
        self._headers = {"User-Agent": normalized_user_agent, "Accept": "application/json"}
        self._transport = transport

    def adapter_base_url(self) -> str:
        """Return normalized base URL without trailing slash."""

        return self._base_url

    def adapter_resource_url(self, resource_path: str) -> str:
        """Return absolute URL of one upstream resource.

        Args:
            resource_path: Path relative to the configured base URL, for example `people`.

        Returns:
            str: Absolute resource URL.

        Raises:
            ValueError: Raised when resource path is blank.
        """

        normalized_path = resource_path.strip().strip("/")
        if not normalized_path:
            raise ValueError("resource_path must not be blank")
        return f"{self._base_url}/{normalized_path}"

    async def adapter_fetch_json(
        self,
        url: str,
        query_parameters: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | FetchError:
        """Execute one HTTP GET and return the decoded JSON object.

        No retries are attempted. Transport failures, timeouts, non-2xx
        statuses and undecodable bodies map to `UPSTREAM_UNAVAILABLE`; a body
        that decodes to something other than a JSON object maps to
        `SHAPE_MISMATCH`.

        Args:
            url: Absolute resource URL.
            query_parameters: Optional flat query parameters forwarded verbatim.

        Returns:
            dict[str, Any] | FetchError: Decoded JSON object or typed failure value.

        Raises:
            asyncio.CancelledError: Raised when the awaiting task is cancelled.
        """

        request_parameters = dict(query_parameters) if query_parameters else None
        logger.debug("upstream GET %s params=%s", url, request_parameters)
        try:
            async with httpx.AsyncClient(
                headers=self._headers,
                timeout=httpx.Timeout(self._timeout_seconds),
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=request_parameters)
        except httpx.TimeoutException:
            return self._adapter_log_failure(domain_upstream_error("SWAPI request timed out", source_url=url))
        except httpx.HTTPError as error:
            return self._adapter_log_failure(
                domain_upstream_error(f"SWAPI request failed: {error.__class__.__name__}: {error}", source_url=url)
            )

        if not response.is_success:
            return self._adapter_log_failure(
                domain_upstream_error(f"SWAPI returned HTTP {response.status_code}", source_url=url)
            )

        try:
            payload = response.json()
        except ValueError:
            return self._adapter_log_failure(domain_upstream_error("SWAPI response body is not valid JSON", source_url=url))

        if not isinstance(payload, dict):
            return self._adapter_log_failure(
                domain_shape_mismatch_error(
                    f"SWAPI response must be a JSON object, got {type(payload).__name__}",
                    source_url=url,
                )
            )
        return payload

    def _adapter_log_failure(self, failure: FetchError) -> FetchError:
        logger.warning("upstream fetch failed kind=%s url=%s: %s", failure.kind.value, failure.source_url, failure.message)
        return failure
