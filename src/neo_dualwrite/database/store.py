"""
Legacy store access for tuple collectors using asyncpg.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, List, Mapping, Optional, Protocol, Sequence, runtime_checkable

import asyncpg
from asyncpg import Pool

from ..config.settings import DualWriteSettings
from ..core.exceptions import DatabaseConfigurationError
from .dialects import POSTGRES, SQLDialect, get_dialect

logger = logging.getLogger(__name__)


@runtime_checkable
class LegacyStore(Protocol):
    """Executes read queries against the legacy permission tables."""

    @property
    def dialect(self) -> SQLDialect:
        """Dialect used to quote identifiers and render placeholders."""
        ...

    async def fetch(self, query: str, *args: Any) -> Sequence[Mapping[str, Any]]:
        """Run a query and return all rows."""
        ...


class AsyncPGLegacyStore:
    """PostgreSQL legacy store backed by an asyncpg connection pool."""

    def __init__(
        self,
        database_url: str,
        dialect: SQLDialect = POSTGRES,
        **pool_config
    ):
        """Initialize the store.

        Args:
            database_url: PostgreSQL DSN, a ``+asyncpg`` driver suffix is stripped
            dialect: Quoting and placeholder capability, must use numbered placeholders
            **pool_config: Additional asyncpg pool options
        """
        if not database_url:
            raise DatabaseConfigurationError("Legacy store requires a database URL")
        if not dialect.numbered_placeholders:
            raise DatabaseConfigurationError(
                f"Dialect '{dialect.name}' is not compatible with asyncpg"
            )

        self.dsn = database_url.replace("+asyncpg", "")
        self._dialect = dialect
        self.pool: Optional[Pool] = None
        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "command_timeout": 60,
            **pool_config
        }

    @classmethod
    def from_settings(cls, settings: DualWriteSettings) -> "AsyncPGLegacyStore":
        """Build a store from dual-write settings."""
        return cls(
            settings.database_url,
            dialect=get_dialect(settings.sql_dialect),
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )

    @property
    def dialect(self) -> SQLDialect:
        return self._dialect

    async def create_pool(self) -> Pool:
        """Create the connection pool on first use."""
        if self.pool is None:
            logger.info(f"Creating legacy store pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(self.dsn, **self.pool_config)
        return self.pool

    async def close(self) -> None:
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Legacy store pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        pool = await self.create_pool()
        async with pool.acquire() as connection:
            yield connection

    async def fetch(self, query: str, *args: Any) -> List[asyncpg.Record]:
        """Fetch all rows for a query."""
        async with self.acquire() as connection:
            return await connection.fetch(query, *args)

    async def __aenter__(self) -> "AsyncPGLegacyStore":
        await self.create_pool()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
