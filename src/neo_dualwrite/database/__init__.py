"""Legacy store access for neo-dualwrite."""

from .dialects import SQLDialect, POSTGRES, MYSQL, SQLITE, get_dialect
from .store import LegacyStore, AsyncPGLegacyStore

__all__ = [
    "SQLDialect",
    "POSTGRES",
    "MYSQL",
    "SQLITE",
    "get_dialect",
    "LegacyStore",
    "AsyncPGLegacyStore",
]
