"""Integration tests for provisioning (requires PostgreSQL with pgcrypto).

Run with: uv run pytest supplydb/features/schema/tests/test_integration.py -v -m integration

SAFETY: These tests drop every table. They require either APP_ENV=testing
or ALLOW_DESTRUCTIVE_TEST_DB=true.
"""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.config import get_settings
from supplydb.core.database import open_connection
from supplydb.features.schema import registry
from supplydb.features.schema.provisioner import Provisioner

pytestmark = pytest.mark.integration

COLUMNS_QUERY = text(
    """
    SELECT table_name, column_name, data_type, is_nullable
    FROM information_schema.columns
    WHERE table_schema = 'public'
    ORDER BY table_name, ordinal_position
    """
)

INDEXES_QUERY = text(
    "SELECT indexname FROM pg_indexes WHERE schemaname = 'public' ORDER BY indexname"
)


@pytest_asyncio.fixture(scope="function")
async def conn() -> AsyncGenerator[AsyncConnection, None]:
    """Open a connection to the test database."""
    allow_destructive = os.environ.get("ALLOW_DESTRUCTIVE_TEST_DB", "").lower() == "true"
    if not get_settings().is_testing and not allow_destructive:
        raise RuntimeError(
            "Destructive test operations require explicit opt-in. "
            "Set ALLOW_DESTRUCTIVE_TEST_DB=true or APP_ENV=testing"
        )

    async with open_connection() as connection:
        yield connection


async def snapshot(conn: AsyncConnection) -> tuple[list, list]:
    """Columns and indexes of the public schema."""
    async with conn.begin():
        columns = (await conn.execute(COLUMNS_QUERY)).fetchall()
        indexes = (await conn.execute(INDEXES_QUERY)).fetchall()
    return columns, indexes


class TestProvisioner:
    """Integration tests for Provisioner."""

    @pytest.mark.asyncio
    async def test_provision_twice_is_identical(self, conn: AsyncConnection) -> None:
        """Running twice yields the same structure and drops every table."""
        await Provisioner().provision(conn)
        first = await snapshot(conn)

        result = await Provisioner().provision(conn)
        second = await snapshot(conn)

        assert first == second
        assert sorted(result.dropped) == sorted(registry.table_names())
        assert result.missing == []

    @pytest.mark.asyncio
    async def test_indexes_exist(self, conn: AsyncConnection) -> None:
        """Both secondary indexes are created."""
        await Provisioner().provision(conn)
        _, indexes = await snapshot(conn)

        names = {row[0] for row in indexes}
        assert {"user_index", "user_role_index"} <= names

    @pytest.mark.asyncio
    async def test_tables_start_empty(self, conn: AsyncConnection) -> None:
        """Provisioning leaves every table empty."""
        await Provisioner().provision(conn)

        async with conn.begin():
            for name in registry.table_names():
                count = (await conn.execute(text(f"SELECT COUNT(*) FROM {name}"))).scalar()
                assert count == 0, name
