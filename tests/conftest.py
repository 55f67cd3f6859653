"""Pytest configuration and fixtures for neo-dualwrite tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from neo_dualwrite.database.dialects import POSTGRES
from neo_dualwrite.features.tuples.entities import TupleKey
from neo_dualwrite.integrations.authz.protocols import ReadResponse, StoredTuple


@pytest.fixture
def mock_store():
    """Mock legacy store returning no rows."""
    store = MagicMock()
    store.dialect = POSTGRES
    store.fetch = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_authz_client():
    """Mock authorization engine client."""
    client = MagicMock()
    client.read = AsyncMock()
    return client


@pytest.fixture
def make_page():
    """Factory building one read response page from canonical tuple strings."""
    def _make_page(*values: str, token: str = "") -> ReadResponse:
        return ReadResponse(
            tuples=[StoredTuple(key=TupleKey.parse(v)) for v in values],
            continuation_token=token,
        )
    return _make_page
