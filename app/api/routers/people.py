"""People API router composition for the aggregated people list endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.aggregation import PeopleQueryPort
from app.domain import ErrorClassification, FetchError

_CLASSIFICATION_STATUS_CODES = {
    ErrorClassification.BAD_GATEWAY: status.HTTP_502_BAD_GATEWAY,
    ErrorClassification.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def api_create_people_router(people_aggregator: PeopleQueryPort) -> APIRouter:
    """Create people router exposing the paginated people list.

    Args:
        people_aggregator: Aggregation-layer people query implementation.

    Returns:
        APIRouter: Router exposing `/api/people`.

    Raises:
        ValueError: Raised when people_aggregator is invalid.
    """

    if people_aggregator is None:
        raise ValueError("people_aggregator must not be None")

    router = APIRouter(prefix="/api", tags=["people"])

    @router.get("/people")
    async def api_people_list(request: Request) -> JSONResponse:
        """Return one enriched people page.

        All query parameters are forwarded to the upstream list endpoint unchanged.

        Returns:
            JSONResponse: Envelope payload, or error payload with 502/500 status.

        Raises:
            RuntimeError: Raised when aggregation fails unexpectedly.
        """

        query_parameters = dict(request.query_params)
        outcome = await people_aggregator.aggregator_get_people(query_parameters=query_parameters)
        if isinstance(outcome, FetchError):
            return api_build_error_response(outcome)
        return JSONResponse(content=outcome.envelope_to_payload(), status_code=status.HTTP_200_OK)

    return router


def api_build_error_response(failure: FetchError) -> JSONResponse:
    """Translate one failure value into an HTTP error response.

    Args:
        failure: Typed failure value.

    Returns:
        JSONResponse: 502 for upstream-side failures, 500 for internal failures.

    Raises:
        KeyError: Raised when failure classification has no status mapping.
    """

    payload = {
        "status": "error",
        "code": failure.error_code,
        "message": failure.message,
    }
    return JSONResponse(content=payload, status_code=_CLASSIFICATION_STATUS_CODES[failure.classification])
