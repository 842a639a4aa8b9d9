"""Async SQLAlchemy 2.0 database setup."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from supplydb.core.config import get_settings
from supplydb.core.exceptions import ConnectivityError


class Base(DeclarativeBase):
    """SQLAlchemy declarative base for all models."""

    pass


def get_engine() -> AsyncEngine:
    """Create async engine from settings."""
    settings = get_settings()
    connect_args: dict[str, str] = {}
    if settings.database_ssl != "disable":
        connect_args["ssl"] = settings.database_ssl
    engine: AsyncEngine = create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        connect_args=connect_args,
    )
    return engine


@asynccontextmanager
async def open_connection(
    engine: AsyncEngine | None = None,
) -> AsyncGenerator[AsyncConnection, None]:
    """Open the single connection a batch run works on.

    Args:
        engine: Engine to connect with; built from settings when omitted.

    Yields:
        AsyncConnection with no transaction started.

    Raises:
        ConnectivityError: If the database cannot be reached.
    """
    owns_engine = engine is None
    engine = engine or get_engine()
    try:
        try:
            conn = await engine.connect()
            await conn.execute(text("SELECT 1"))
            await conn.commit()
        except (DBAPIError, OSError) as e:
            raise ConnectivityError(
                f"Cannot connect to database: {e}",
                details={"url": engine.url.render_as_string(hide_password=True)},
            ) from e

        try:
            yield conn
        finally:
            await conn.close()
    finally:
        if owns_engine:
            await engine.dispose()
