"""
SQL dialect capabilities for legacy store queries.

Collectors only need two things from a dialect: quoting identifiers that
collide with reserved words (the legacy ``user`` table) and rendering
positional parameter placeholders.
"""
from dataclasses import dataclass
from typing import Dict

from ..core.exceptions import DatabaseConfigurationError


@dataclass(frozen=True)
class SQLDialect:
    """Identifier quoting and placeholder rendering for one SQL dialect."""

    name: str
    quote_open: str
    quote_close: str
    numbered_placeholders: bool = False

    def quote(self, identifier: str) -> str:
        """Quote an identifier, escaping embedded quote characters."""
        escaped = identifier.replace(self.quote_close, self.quote_close * 2)
        return f"{self.quote_open}{escaped}{self.quote_close}"

    def placeholder(self, position: int) -> str:
        """Render the placeholder for a 1-based parameter position."""
        if position < 1:
            raise ValueError(f"Parameter position must be >= 1, got {position}")
        return f"${position}" if self.numbered_placeholders else "?"


POSTGRES = SQLDialect(name="postgres", quote_open='"', quote_close='"', numbered_placeholders=True)
MYSQL = SQLDialect(name="mysql", quote_open="`", quote_close="`")
SQLITE = SQLDialect(name="sqlite", quote_open='"', quote_close='"')

_DIALECTS: Dict[str, SQLDialect] = {
    "postgres": POSTGRES,
    "postgresql": POSTGRES,
    "mysql": MYSQL,
    "sqlite": SQLITE,
    "sqlite3": SQLITE,
}


def get_dialect(name: str) -> SQLDialect:
    """Look up a dialect by name."""
    try:
        return _DIALECTS[name.strip().lower()]
    except KeyError:
        raise DatabaseConfigurationError(
            f"Unsupported SQL dialect '{name}'",
            details={"supported": sorted(_DIALECTS)},
        ) from None
