"""Sparse relation seeding: product requirements and product locations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.logging import get_logger
from supplydb.features.schema.models import (
    ClientAddress,
    Product,
    ProductLocation,
    ProductRequirement,
    Warehouse,
)
from supplydb.shared.seeder.generators import RelationGenerator
from supplydb.shared.seeder.queries import batch_insert, fetch_ids

if TYPE_CHECKING:
    from supplydb.shared.seeder.config import SeederConfig

logger = get_logger(__name__)


@dataclass
class RelationCounts:
    """Rows inserted per relation table."""

    product_requirements: int = 0
    product_locations: int = 0


class RelationSeeder:
    """Populates requirement and location rows from the synthetic count formula.

    Both relations use the same bounded product subset: the first
    `product_sample_size` products by id.
    """

    def __init__(self, config: SeederConfig) -> None:
        """Initialize the relation seeder.

        Args:
            config: Seeder configuration.
        """
        self.config = config

    async def seed(self, conn: AsyncConnection) -> RelationCounts:
        """Insert product requirements, then product locations.

        Args:
            conn: Connection with an open transaction.

        Returns:
            RelationCounts with rows inserted per table.
        """
        product_ids = await fetch_ids(conn, Product.id, limit=self.config.product_sample_size)
        client_address_ids = await fetch_ids(conn, ClientAddress.id)
        warehouse_ids = await fetch_ids(conn, Warehouse.id)

        requirements = RelationGenerator("client_address_id").generate(
            client_address_ids, product_ids
        )
        locations = RelationGenerator("warehouse_id").generate(warehouse_ids, product_ids)

        logger.info(
            "seeder.relations.generating",
            products=len(product_ids),
            client_addresses=len(client_address_ids),
            warehouses=len(warehouse_ids),
            requirements=len(requirements),
            locations=len(locations),
            skipped=(len(client_address_ids) + len(warehouse_ids)) * len(product_ids)
            - len(requirements)
            - len(locations),
        )

        return RelationCounts(
            product_requirements=await batch_insert(
                conn, ProductRequirement, requirements, self.config.batch_size
            ),
            product_locations=await batch_insert(
                conn, ProductLocation, locations, self.config.batch_size
            ),
        )
