"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

from app.domain import FetchError


@dataclass(frozen=True)
class UpstreamClientConfig:
    """Construction config for upstream HTTP clients.

    Attributes:
        base_url: Absolute base URL every resource path is resolved against.
        timeout_seconds: Per-request timeout in seconds.
        user_agent: User-Agent header value.
    """

    base_url: str
    timeout_seconds: float = 30.0
    user_agent: str = "swapi-people-proxy/1.0 (Python/httpx)"


class UpstreamClientPort(Protocol):
    """Port definition for fetching decoded JSON payloads from the upstream API."""

    def adapter_base_url(self) -> str:
        """Return configured upstream base URL for diagnostics.

        Returns:
            str: Base URL without trailing slash.

        Raises:
            RuntimeError: Raised when base URL metadata is unavailable.
        """

    def adapter_resource_url(self, resource_path: str) -> str:
        """Return absolute URL of one upstream resource.

        Args:
            resource_path: Path relative to the configured base URL.

        Returns:
            str: Absolute resource URL.

        Raises:
            ValueError: Raised when resource path is blank.
        """

    async def adapter_fetch_json(
        self,
        url: str,
        query_parameters: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | FetchError:
        """Fetch and decode one upstream JSON object.

        Args:
            url: Absolute resource URL.
            query_parameters: Optional flat query parameters.

        Returns:
            dict[str, Any] | FetchError: Decoded JSON object or typed failure value.

        Raises:
            asyncio.CancelledError: Raised when the awaiting task is cancelled.
        """
