"""Shared insert/fetch helpers for the seeders."""

from __future__ import annotations

from typing import Any

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.orm import InstrumentedAttribute


async def batch_insert(
    conn: AsyncConnection,
    table: type,
    records: list[dict[str, Any]],
    batch_size: int,
) -> int:
    """Insert records in batches.

    Duplicates are not skipped: a uniqueness violation aborts the enclosing
    transaction.

    Args:
        conn: Async database connection.
        table: SQLAlchemy model class.
        records: List of record dictionaries.
        batch_size: Rows per executemany call.

    Returns:
        Number of records inserted.
    """
    if not records:
        return 0

    for i in range(0, len(records), batch_size):
        await conn.execute(insert(table), records[i : i + batch_size])

    return len(records)


async def fetch_ids(
    conn: AsyncConnection,
    column: InstrumentedAttribute[int],
    limit: int | None = None,
) -> list[int]:
    """Fetch identifiers of a table, ordered by the identifier.

    Args:
        conn: Async database connection.
        column: Primary key attribute, e.g. Country.id.
        limit: Keep only the first `limit` identifiers.

    Returns:
        Identifiers in ascending order.
    """
    stmt = select(column).order_by(column)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await conn.execute(stmt)
    return list(result.scalars().all())


async def fetch_id_name_pairs(
    conn: AsyncConnection,
    id_column: InstrumentedAttribute[int],
    name_column: InstrumentedAttribute[str],
) -> list[tuple[int, str]]:
    """Fetch (id, name) pairs ordered by id."""
    result = await conn.execute(select(id_column, name_column).order_by(id_column))
    return [(row[0], row[1]) for row in result.fetchall()]
