"""Destructive schema provisioning: drop, create, index."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Index, Table, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.schema import CreateIndex, CreateTable, DropTable

from supplydb.core.exceptions import SchemaError, sqlstate_of
from supplydb.core.logging import get_logger
from supplydb.features.schema import registry

logger = get_logger(__name__)

# SQLSTATE for "relation does not exist"
UNDEFINED_TABLE = "42P01"

CREATE_EXTENSION = {
    "pgcrypto": text("CREATE EXTENSION IF NOT EXISTS pgcrypto"),
}


class DropTableCascade(DropTable):
    """DROP TABLE that also removes dependent objects."""


@compiles(DropTableCascade)
def _compile_drop_table_cascade(element: DropTableCascade, compiler: Any, **kw: Any) -> str:
    return f"{compiler.visit_drop_table(element, **kw)} CASCADE"


@dataclass
class ProvisionResult:
    """Outcome of a provisioning run.

    Attributes:
        dropped: Tables that existed and were dropped.
        missing: Tables that did not exist when dropping.
        created: Tables created, in creation order.
        indexes: Indexes created.
    """

    dropped: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    created: list[str] = field(default_factory=list)
    indexes: list[str] = field(default_factory=list)


class Provisioner:
    """Drops and recreates the supply-chain schema.

    The drop phase tolerates a fresh database. Creation is all-or-nothing.
    Indexes are created afterwards, one transaction each; an index failure
    leaves the already committed tables in place.
    """

    def __init__(
        self,
        tables: list[Table] | None = None,
        indexes: list[Index] | None = None,
        extensions: tuple[str, ...] = registry.REQUIRED_EXTENSIONS,
    ) -> None:
        """Initialize the provisioner.

        Args:
            tables: Tables in creation order (defaults to the registry).
            indexes: Indexes to create after the tables.
            extensions: Extensions to enable inside the creation transaction.
        """
        self.tables = tables if tables is not None else registry.creation_order()
        self.indexes = indexes if indexes is not None else registry.table_indexes()
        self.extensions = extensions

    async def provision(self, conn: AsyncConnection) -> ProvisionResult:
        """Drop every known table, then create schema and indexes.

        Args:
            conn: Open connection with no transaction in progress.

        Returns:
            ProvisionResult describing what happened.

        Raises:
            SchemaError: If any statement other than dropping a missing table fails.
        """
        result = ProvisionResult()

        await self.drop_tables(conn, result)
        await self.create_tables(conn, result)
        await self.create_indexes(conn, result)

        logger.info(
            "provision.completed",
            dropped=len(result.dropped),
            missing=len(result.missing),
            created=len(result.created),
            indexes=len(result.indexes),
        )

        return result

    async def drop_tables(self, conn: AsyncConnection, result: ProvisionResult) -> None:
        """Drop each table on its own, skipping tables that do not exist."""
        for table in reversed(self.tables):
            try:
                async with conn.begin():
                    await conn.execute(DropTableCascade(table))
            except DBAPIError as e:
                if sqlstate_of(e) != UNDEFINED_TABLE:
                    raise SchemaError(
                        f"Cannot drop table {table.name}: {e.orig}",
                        details={"table": table.name, "sqlstate": sqlstate_of(e)},
                    ) from e
                logger.debug("provision.drop.skipped", table=table.name, reason="missing")
                result.missing.append(table.name)
                continue

            logger.debug("provision.drop.done", table=table.name)
            result.dropped.append(table.name)

    async def create_tables(self, conn: AsyncConnection, result: ProvisionResult) -> None:
        """Enable extensions and create all tables in one transaction."""
        created: list[str] = []
        current: str | None = None
        try:
            async with conn.begin():
                for extension in self.extensions:
                    current = extension
                    await conn.execute(CREATE_EXTENSION[extension])
                for table in self.tables:
                    current = table.name
                    await conn.execute(CreateTable(table))
                    created.append(table.name)
        except DBAPIError as e:
            logger.error("provision.create.rolled_back", failed_at=current, error=str(e.orig))
            raise SchemaError(
                f"Schema creation rolled back at {current}: {e.orig}",
                details={"object": current, "sqlstate": sqlstate_of(e)},
            ) from e

        logger.info("provision.create.committed", tables=created)
        result.created.extend(created)

    async def create_indexes(self, conn: AsyncConnection, result: ProvisionResult) -> None:
        """Create each index in its own transaction."""
        for index in self.indexes:
            try:
                async with conn.begin():
                    await conn.execute(CreateIndex(index))
            except DBAPIError as e:
                raise SchemaError(
                    f"Cannot create index {index.name}: {e.orig}",
                    details={"index": index.name, "sqlstate": sqlstate_of(e)},
                ) from e

            logger.debug("provision.index.created", index=index.name)
            result.indexes.append(str(index.name))
