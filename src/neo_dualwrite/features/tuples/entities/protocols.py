"""Protocol and type aliases for tuple collectors."""

from typing import Dict, Protocol, runtime_checkable

from .tuple_key import TupleKey


# object -> canonical key -> tuple
TupleMap = Dict[str, Dict[str, TupleKey]]

# canonical key -> tuple, for a single object
ObjectTupleMap = Dict[str, TupleKey]


@runtime_checkable
class LegacyTupleCollector(Protocol):
    """Collects the desired tuples for an organization from legacy tables."""

    @property
    def name(self) -> str:
        """Collector name used in logs and errors."""
        ...

    async def collect(self, org_id: int) -> TupleMap:
        """Return tuples keyed by object, then by canonical key."""
        ...
