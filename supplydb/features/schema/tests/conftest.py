"""Test fixtures for schema tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeTransaction:
    """Stand-in for the async context manager returned by conn.begin()."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


class FakeDriverError(Exception):
    """Driver exception carrying a SQLSTATE like asyncpg's."""

    def __init__(self, sqlstate: str) -> None:
        super().__init__(f"driver error {sqlstate}")
        self.sqlstate = sqlstate


@pytest.fixture
def driver_error():
    """Factory for driver errors with a given SQLSTATE."""
    return FakeDriverError


@pytest.fixture
def mock_conn():
    """Create a mock async connection with a working begin()."""
    conn = AsyncMock()
    conn.begin = MagicMock(side_effect=lambda: FakeTransaction())
    conn.execute = AsyncMock(return_value=MagicMock())
    return conn
