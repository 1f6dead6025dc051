"""API router package for endpoint composition."""

from .health import api_create_health_router
from .people import api_build_error_response, api_create_people_router

__all__ = ["api_build_error_response", "api_create_health_router", "api_create_people_router"]
