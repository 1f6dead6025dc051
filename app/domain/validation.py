"""Output contract enforcement for assembled person records."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from .errors import FetchError, domain_validation_error
from .models import PersonRecord


def domain_validate_person_record(
    candidate: Mapping[str, Any],
    source_url: str | None = None,
) -> PersonRecord | FetchError:
    """Validate one assembled record against the `PersonRecord` contract.

    Every field (`name`, `birth_year`, `homeworld.name`, `homeworld.terrain`)
    must be present and a string; nulls and other types are rejected.

    Args:
        candidate: Assembled record mapping.
        source_url: Person URL used for diagnostics.

    Returns:
        PersonRecord | FetchError: Validated record or validation failure.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        return PersonRecord.model_validate(candidate)
    except ValidationError as error:
        return domain_validation_error(
            f"person record failed validation: {domain_format_validation_error(error)}",
            source_url=source_url,
        )


def domain_format_validation_error(error: ValidationError) -> str:
    """Return compact `path: message` summary of pydantic validation errors.

    Args:
        error: Pydantic validation error.

    Returns:
        str: Semicolon-separated error summary.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return "; ".join(
        f"{'.'.join(str(location) for location in detail['loc'])}: {detail['msg']}" for detail in error.errors()
    )
