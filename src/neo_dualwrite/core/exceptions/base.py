"""Base exceptions for neo-dualwrite.

All exceptions inherit from DualWriteError and carry an error code and
structured details so an orchestrator can report failures per collector.
"""

from typing import Any, Dict, Optional


class DualWriteError(Exception):
    """Base exception for all neo-dualwrite errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class TupleFormatError(DualWriteError):
    """Raised when a tuple entry or tuple key string cannot be parsed."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid tuple format '{value}': {reason}",
            details={"value": value, "reason": reason},
        )


def create_error_response(exception: DualWriteError) -> Dict[str, Any]:
    """Create standardized error payload from exception."""
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
