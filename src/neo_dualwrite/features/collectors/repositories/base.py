"""Shared query execution for legacy tuple collectors."""

import logging
from typing import Any, Mapping, Sequence

from ....core.exceptions import LegacyQueryError
from ....database.store import LegacyStore


logger = logging.getLogger(__name__)


class BaseLegacyCollector:
    """Base class for collectors reading the legacy permission tables."""

    name: str = "legacy"

    def __init__(self, store: LegacyStore):
        self.store = store

    def quote(self, identifier: str) -> str:
        return self.store.dialect.quote(identifier)

    def param(self, position: int) -> str:
        return self.store.dialect.placeholder(position)

    async def _fetch(self, query: str, *args: Any) -> Sequence[Mapping[str, Any]]:
        """Run a collector query, aborting the collection on any store error."""
        logger.debug(f"{self.name}: running legacy query")
        try:
            return await self.store.fetch(query, *args)
        except Exception as e:
            logger.error(f"{self.name}: legacy query failed: {e}")
            raise LegacyQueryError(query, str(e), collector=self.name) from e

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
