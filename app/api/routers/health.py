"""Health endpoint router composition for app liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app.adapters import UpstreamClientPort


def api_create_health_router(upstream_client: UpstreamClientPort) -> APIRouter:
    """Create health-check router with app status and upstream base URL.

    The upstream itself is not contacted; health reflects this process only.

    Args:
        upstream_client: Upstream adapter whose base URL is reported.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when upstream_client is invalid.
    """

    if upstream_client is None:
        raise ValueError("upstream_client must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application health state.

        Returns:
            JSONResponse: Deterministic health payload for operational checks.

        Raises:
            RuntimeError: Raised if the adapter cannot report its base URL.
        """

        payload = {
            "status": "ok",
            "app": "up",
            "upstream": upstream_client.adapter_base_url(),
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
