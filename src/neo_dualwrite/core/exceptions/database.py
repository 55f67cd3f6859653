"""Legacy store exceptions for neo-dualwrite."""

from typing import Optional

from .base import DualWriteError


class DatabaseError(DualWriteError):
    """Base class for legacy store errors."""
    pass


class DatabaseConfigurationError(DatabaseError):
    """Raised when the legacy store is misconfigured."""
    pass


class LegacyQueryError(DatabaseError):
    """Raised when a query against the legacy store fails."""

    def __init__(self, query: str, error: str, collector: Optional[str] = None):
        self.query = query
        self.query_error = error
        self.collector = collector
        # Truncate query for error message
        compact = " ".join(query.split())
        query_preview = compact[:100] + "..." if len(compact) > 100 else compact
        super().__init__(
            f"Legacy query failed: {error}\nQuery: {query_preview}",
            details={"collector": collector, "error": error},
        )
