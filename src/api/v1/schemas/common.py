"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error body produced by the exception handlers."""

    error_code: str
    message: str
    details: Any | None = None
    request_id: str | None = None


NOT_FOUND = {"model": ErrorResponse, "description": "Unknown id"}
INVALID = {"model": ErrorResponse, "description": "Rejected input"}
