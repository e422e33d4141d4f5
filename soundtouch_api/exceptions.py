"""Exceptions raised by the SoundTouch models."""

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from soundtouch_api.models.zone import ZoneOperation


class ErrorCode(str, Enum):
    """Error codes for structured error reporting."""

    # Validation errors
    MISSING_FIELD = "MISSING_FIELD"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    MALFORMED_VALUE = "MALFORMED_VALUE"
    CARDINALITY = "CARDINALITY"
    SELF_REFERENCE = "SELF_REFERENCE"
    DUPLICATE = "DUPLICATE"

    # Parse errors
    UNEXPECTED_ELEMENT = "UNEXPECTED_ELEMENT"
    TIME_PARSE = "TIME_PARSE"

    # Zone errors
    ZONE_OPERATION = "ZONE_OPERATION"


class SoundTouchError(Exception):
    """Base exception for SoundTouch model errors.

    Carries a machine readable code and optional details alongside the
    human readable message.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ModelValidationError(SoundTouchError, ValueError):
    """A request or payload failed field-level validation."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.field = field
        super().__init__(message, code, details)


class MissingFieldError(ModelValidationError):
    """A required field is empty."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.MISSING_FIELD, field, details)


class OutOfRangeError(ModelValidationError):
    """A numeric value is outside its allowed range."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.OUT_OF_RANGE, field, details)


class MalformedValueError(ModelValidationError):
    """A value does not follow the required syntax."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.MALFORMED_VALUE, field, details)


class CardinalityError(ModelValidationError):
    """A collection holds the wrong number of entries."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CARDINALITY, field, details)


class SelfReferenceError(ModelValidationError):
    """An entry refers back to its own owner."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.SELF_REFERENCE, field, details)


class DuplicateMemberError(ModelValidationError):
    """The same device appears more than once."""

    def __init__(self, message: str, field: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.DUPLICATE, field, details)


class UnexpectedElementError(SoundTouchError, ValueError):
    """A well-formed document has a different root element than expected."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            f"expected element type <{expected}> but have <{actual}>",
            ErrorCode.UNEXPECTED_ELEMENT,
            {"expected": expected, "actual": actual},
        )


class TimeParseError(SoundTouchError, ValueError):
    """No usable time could be read from a clock payload."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.TIME_PARSE, details)


class ZoneOperationError(SoundTouchError):
    """A zone operation failed for a device."""

    def __init__(self, operation: "ZoneOperation", device_id: str = "", reason: str = ""):
        self.operation = operation
        self.device_id = device_id
        self.reason = reason
        description = operation.description
        if device_id:
            message = f"zone {description} failed for device {device_id}: {reason}"
        else:
            message = f"zone {description} failed: {reason}"
        super().__init__(
            message,
            ErrorCode.ZONE_OPERATION,
            {"operation": operation.value, "device_id": device_id, "reason": reason},
        )
