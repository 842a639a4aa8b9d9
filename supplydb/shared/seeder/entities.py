"""Base entity seeding: countries through client addresses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.logging import get_logger
from supplydb.features.schema.models import (
    Client,
    ClientAddress,
    Country,
    Product,
    ProductCategory,
    ProductSubcategory,
    Supplier,
    Warehouse,
)
from supplydb.shared.seeder.generators import (
    client_address_records,
    client_records,
    country_records,
    product_records,
    subcategory_records,
    supplier_records,
    warehouse_records,
)
from supplydb.shared.seeder.queries import batch_insert, fetch_ids

if TYPE_CHECKING:
    from supplydb.shared.seeder.config import SeederConfig
    from supplydb.shared.seeder.sources import SeedSource

logger = get_logger(__name__)


@dataclass
class EntityCounts:
    """Rows inserted per base entity."""

    countries: int = 0
    suppliers: int = 0
    clients: int = 0
    categories: int = 0
    subcategories: int = 0
    products: int = 0
    warehouses: int = 0
    client_addresses: int = 0


class EntitySeeder:
    """Inserts base entities and wires their foreign keys round-robin.

    Runs inside the caller's transaction. Each step reads back the
    identifiers it depends on, so nothing assumes how keys are generated.
    """

    def __init__(self, config: SeederConfig, source: SeedSource) -> None:
        """Initialize the entity seeder.

        Args:
            config: Seeder configuration.
            source: Ordered seed lists.
        """
        self.config = config
        self.source = source

    async def seed(self, conn: AsyncConnection) -> EntityCounts:
        """Insert all base entities in dependency order.

        Args:
            conn: Connection with an open transaction.

        Returns:
            EntityCounts with rows inserted per entity.

        Raises:
            ExhaustionError: If a list needed as round-robin target is empty.
        """
        counts = EntityCounts()

        counts.countries = await self._insert(conn, Country, country_records(self.source.countries))

        country_ids = await fetch_ids(conn, Country.id)
        counts.suppliers = await self._insert(
            conn,
            Supplier,
            supplier_records(self.source.suppliers, self.source.emails, country_ids),
        )

        counts.clients = await self._insert(
            conn, Client, client_records(self.source.clients, self.source.emails)
        )

        counts.categories, counts.subcategories = await self._seed_categories(conn)

        subcategory_ids = await fetch_ids(conn, ProductSubcategory.id)
        supplier_ids = await fetch_ids(conn, Supplier.id)
        counts.products = await self._insert(
            conn,
            Product,
            product_records(self.source.products, subcategory_ids, supplier_ids),
        )

        counts.warehouses = await self._insert(
            conn, Warehouse, warehouse_records(self.source.addresses)
        )

        client_ids = await fetch_ids(conn, Client.id)
        counts.client_addresses = await self._insert(
            conn,
            ClientAddress,
            client_address_records(self.source.addresses, client_ids),
        )

        return counts

    async def _seed_categories(self, conn: AsyncConnection) -> tuple[int, int]:
        """Insert each category, then its subcategories under the returned key."""
        categories = 0
        subcategories = 0

        for category, names in self.source.product_categories.items():
            result = await conn.execute(
                insert(ProductCategory).values(name=category).returning(ProductCategory.id)
            )
            category_id = result.scalar_one()
            categories += 1

            subcategories += await batch_insert(
                conn,
                ProductSubcategory,
                subcategory_records(category_id, names),
                self.config.batch_size,
            )

        logger.info(
            "seeder.product_categories.inserted",
            categories=categories,
            subcategories=subcategories,
        )

        return categories, subcategories

    async def _insert(self, conn: AsyncConnection, table: type, records: list) -> int:
        count = await batch_insert(conn, table, records, self.config.batch_size)
        logger.info(f"seeder.{table.__tablename__}.inserted", count=count)
        return count
