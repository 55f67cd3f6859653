"""Exception hierarchy for neo-dualwrite."""

from .base import DualWriteError, TupleFormatError, create_error_response
from .database import DatabaseError, DatabaseConfigurationError, LegacyQueryError
from .authz import AuthzError, AuthzReadError, AuthzResponseError, AuthzPaginationError

__all__ = [
    "DualWriteError",
    "TupleFormatError",
    "create_error_response",
    "DatabaseError",
    "DatabaseConfigurationError",
    "LegacyQueryError",
    "AuthzError",
    "AuthzReadError",
    "AuthzResponseError",
    "AuthzPaginationError",
]
