#!/usr/bin/env python
"""Check database connectivity and the extensions the seeder needs.

Usage:
    uv run python scripts/check_db.py
"""

import asyncio
import sys

from sqlalchemy import text

from supplydb.core.config import get_settings
from supplydb.core.database import get_engine, open_connection
from supplydb.core.exceptions import ConnectivityError
from supplydb.features.schema.registry import REQUIRED_EXTENSIONS


async def check_database() -> int:
    """Verify database connection and extension availability."""
    settings = get_settings()

    print("supplydb - Database Connectivity Check")
    print("=" * 45)
    print(f"Database URL: {settings.database_url.split('@')[-1]}")  # Hide credentials
    print(f"SSL mode: {settings.database_ssl}")
    print()

    engine = get_engine()

    try:
        async with open_connection(engine) as conn:
            print("[OK] Basic connectivity")

            result = await conn.execute(text("SELECT version()"))
            version = result.scalar()
            print(f"[OK] PostgreSQL version: {version[:50]}...")

            result = await conn.execute(
                text("SELECT name FROM pg_available_extensions WHERE name = ANY(:names)"),
                {"names": list(REQUIRED_EXTENSIONS)},
            )
            available = set(result.scalars().all())
            for extension in REQUIRED_EXTENSIONS:
                if extension in available:
                    print(f"[OK] {extension} extension available")
                else:
                    print(f"[WARN] {extension} extension not available")
                    print("       Password hashes cannot be stored without it.")

        print()
        print("Database check completed successfully!")
        return 0

    except ConnectivityError as e:
        print(f"[FAIL] {e.message}")
        print()
        print("Troubleshooting:")
        print("  1. Ensure PostgreSQL is running: docker-compose up -d")
        print("  2. Check DATABASE_URL or POSTGRES_* in .env file")
        print("  3. Set DATABASE_SSL=disable for a local server without TLS")
        return 1

    finally:
        await engine.dispose()


def main():
    sys.exit(asyncio.run(check_database()))


if __name__ == "__main__":
    main()
