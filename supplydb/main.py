"""Batch entry point: drop, recreate and seed the supply-chain database.

Usage:
    # Provision and seed with the packaged seed lists
    uv run python -m supplydb.main

    # Use seed lists from a YAML file
    uv run python -m supplydb.main --source examples/seed/source_small.yaml

    # Show current row counts / verify integrity of an existing run
    uv run python -m supplydb.main --status
    uv run python -m supplydb.main --verify
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import uuid
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.config import get_settings
from supplydb.core.database import open_connection
from supplydb.core.exceptions import SupplyDBError
from supplydb.core.logging import configure_logging, get_logger, run_id_ctx
from supplydb.shared.seeder import (
    DataSeeder,
    SeederConfig,
    SeedSource,
    initialize_database,
    load_seed_source,
)

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        description="Supply-chain database initializer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Drop, create and seed (no flags needed)
  supplydb-init

  # Bound relation rows to the first 5 products
  supplydb-init --product-sample-size 5

  # Verify an existing dataset
  supplydb-init --verify
        """,
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "--status",
        action="store_true",
        help="Show current row counts instead of initializing",
    )
    mode_group.add_argument(
        "--verify",
        action="store_true",
        help="Verify data integrity instead of initializing",
    )

    parser.add_argument(
        "--source",
        type=Path,
        help="Load seed lists from a YAML file",
    )
    parser.add_argument(
        "--product-sample-size",
        type=int,
        help="Number of products relation rows are generated for (default: from settings)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable detailed logging",
    )

    return parser


def print_counts(counts: dict[str, int], title: str = "Current Row Counts") -> None:
    """Print table counts in a formatted way."""
    print(f"\n{title}:")
    print("-" * 40)
    for table, count in counts.items():
        print(f"  {table:<30} {count:>8,}")
    print("-" * 40)
    print(f"  {'Total':<30} {sum(counts.values()):>8,}")
    print()


async def run_initialize(
    conn: AsyncConnection,
    config: SeederConfig,
    source: SeedSource,
) -> int:
    """Drop, create and seed."""
    result = await initialize_database(conn, config, source)

    provision = result.provision
    entities = result.seed.entities
    relations = result.seed.relations
    identities = result.seed.identities

    print("\nInitialization Complete!")
    print("-" * 40)
    print(f"  Tables dropped:       {len(provision.dropped):>8,}")
    print(f"  Tables created:       {len(provision.created):>8,}")
    print(f"  Indexes created:      {len(provision.indexes):>8,}")
    print(f"  Countries:            {entities.countries:>8,}")
    print(f"  Suppliers:            {entities.suppliers:>8,}")
    print(f"  Clients:              {entities.clients:>8,}")
    print(f"  Categories:           {entities.categories:>8,}")
    print(f"  Subcategories:        {entities.subcategories:>8,}")
    print(f"  Products:             {entities.products:>8,}")
    print(f"  Warehouses:           {entities.warehouses:>8,}")
    print(f"  Client addresses:     {entities.client_addresses:>8,}")
    print(f"  Product requirements: {relations.product_requirements:>8,}")
    print(f"  Product locations:    {relations.product_locations:>8,}")
    print(f"  Users:                {identities.users:>8,}")
    print("-" * 40)
    print(f"  Product sample size:  {result.seed.product_sample_size:>8,}")
    print()

    return 0


async def run_status(conn: AsyncConnection, config: SeederConfig) -> int:
    """Show current data status."""
    counts = await DataSeeder(config).get_current_counts(conn)
    print_counts(counts)
    return 0


async def run_verify(conn: AsyncConnection, config: SeederConfig) -> int:
    """Verify data integrity."""
    print("Verifying data integrity...")
    print()

    errors = await DataSeeder(config).verify_data_integrity(conn)

    if errors:
        print("ERRORS FOUND:")
        for error in errors:
            print(f"  - {error}")
        return 1

    print("All integrity checks passed!")
    return 0


async def run(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the requested mode.

    Returns:
        Process exit status.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging("DEBUG" if args.verbose else None)
    token = run_id_ctx.set(uuid.uuid4().hex[:12])

    try:
        destructive = not (args.status or args.verify)
        if destructive and settings.is_production and not settings.seeder_allow_production:
            print("ERROR: Cannot initialize the database in production environment.")
            print("Set SEEDER_ALLOW_PRODUCTION=true to override (not recommended).")
            return 1

        try:
            config = SeederConfig.from_settings(settings)
            if args.product_sample_size is not None:
                config = replace(config, product_sample_size=args.product_sample_size)
            source = load_seed_source(args.source) if args.source else SeedSource()
        except (FileNotFoundError, ValueError) as e:
            print(f"ERROR: {e}")
            return 1

        try:
            async with open_connection() as conn:
                if args.status:
                    return await run_status(conn, config)
                if args.verify:
                    return await run_verify(conn, config)
                return await run_initialize(conn, config, source)
        except SupplyDBError as e:
            logger.error(
                "app.run_failed",
                error=e.message,
                error_type=type(e).__name__,
                error_code=e.code,
                details=e.details,
            )
            print(f"ERROR [{e.code}]: {e.message}")
            return 1
    finally:
        run_id_ctx.reset(token)


def main() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
