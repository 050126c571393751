"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the engine and the API."""

    # Not found errors (404)
    NOT_FOUND = "NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    ATTRIBUTE_NOT_FOUND = "ATTRIBUTE_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_TIME_RANGE = "INVALID_TIME_RANGE"
    MISSING_SELECT_OPTIONS = "MISSING_SELECT_OPTIONS"
    REORDER_OUT_OF_RANGE = "REORDER_OUT_OF_RANGE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Malformed input rejected before any state change."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class NotFoundError(AppException):
    """An id referenced by an operation does not resolve."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.NOT_FOUND,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class MemberNotFoundError(NotFoundError):
    """Member not found."""

    def __init__(self, member_id: str) -> None:
        super().__init__(
            message=f"Member not found: {member_id}",
            error_code=ErrorCode.MEMBER_NOT_FOUND,
            details={"member_id": member_id},
        )


class EventNotFoundError(NotFoundError):
    """Event not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            message=f"Event not found: {event_id}",
            error_code=ErrorCode.EVENT_NOT_FOUND,
            details={"event_id": event_id},
        )


class GroupNotFoundError(NotFoundError):
    """Group not found within its event."""

    def __init__(self, event_id: str, group_id: str) -> None:
        super().__init__(
            message=f"Group not found: {group_id}",
            error_code=ErrorCode.GROUP_NOT_FOUND,
            details={"event_id": event_id, "group_id": group_id},
        )


class AttributeNotFoundError(NotFoundError):
    """Attribute definition not found."""

    def __init__(self, attribute_id: str) -> None:
        super().__init__(
            message=f"Attribute not found: {attribute_id}",
            error_code=ErrorCode.ATTRIBUTE_NOT_FOUND,
            details={"attribute_id": attribute_id},
        )


class ReorderIndexError(AppException, IndexError):
    """Reorder index outside the attribute registry."""

    def __init__(self, from_index: int, to_index: int, size: int) -> None:
        super().__init__(
            error_code=ErrorCode.REORDER_OUT_OF_RANGE,
            message=(
                f"Cannot move attribute from {from_index} to {to_index}: "
                f"registry holds {size} definitions"
            ),
            status_code=400,
            details={"from_index": from_index, "to_index": to_index, "size": size},
        )
