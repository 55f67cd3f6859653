"""Core building blocks shared by all neo-dualwrite features."""

from .exceptions import (
    DualWriteError,
    TupleFormatError,
    DatabaseError,
    DatabaseConfigurationError,
    LegacyQueryError,
    AuthzError,
    AuthzReadError,
    AuthzResponseError,
    AuthzPaginationError,
)

__all__ = [
    "DualWriteError",
    "TupleFormatError",
    "DatabaseError",
    "DatabaseConfigurationError",
    "LegacyQueryError",
    "AuthzError",
    "AuthzReadError",
    "AuthzResponseError",
    "AuthzPaginationError",
]
