"""
Protocol definitions for the authorization engine client.
"""
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from ...features.tuples.entities import TupleKey


@dataclass(frozen=True)
class ReadRequest:
    """Read tuples stored for an object and relation."""

    namespace: str
    object: str
    relation: str
    continuation_token: str = ""
    page_size: Optional[int] = None

    def next_page(self, continuation_token: str) -> "ReadRequest":
        """Same request continuing after ``continuation_token``."""
        return replace(self, continuation_token=continuation_token)


@dataclass(frozen=True)
class StoredTuple:
    """Tuple as stored in the authorization engine."""

    key: TupleKey
    timestamp: Optional[datetime] = None


@dataclass(frozen=True)
class ReadResponse:
    """One page of a read. An empty continuation token means no more pages."""

    tuples: List[StoredTuple] = field(default_factory=list)
    continuation_token: str = ""

    @property
    def has_more(self) -> bool:
        return bool(self.continuation_token)


@runtime_checkable
class AuthzClient(Protocol):
    """Client for the authorization engine read API."""

    async def read(self, request: ReadRequest) -> ReadResponse:
        """Read one page of tuples."""
        ...
