"""Adapter layer package for upstream API integration boundaries."""

from .interfaces import UpstreamClientConfig, UpstreamClientPort
from .swapi_http_client import SwapiHttpClient

__all__ = [
	"SwapiHttpClient",
	"UpstreamClientConfig",
	"UpstreamClientPort",
]
