"""Core infrastructure: config, database, logging, exceptions."""

from supplydb.core.config import Settings, get_settings
from supplydb.core.database import Base, get_engine, open_connection
from supplydb.core.logging import get_logger, run_id_ctx

__all__ = [
    "Base",
    "Settings",
    "get_engine",
    "get_logger",
    "get_settings",
    "open_connection",
    "run_id_ctx",
]
