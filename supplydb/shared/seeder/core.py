"""Core seeder orchestration module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.exceptions import translate_db_errors
from supplydb.core.logging import get_logger
from supplydb.features.schema import registry
from supplydb.features.schema.provisioner import Provisioner, ProvisionResult
from supplydb.shared.seeder.entities import EntityCounts, EntitySeeder
from supplydb.shared.seeder.identity import IdentityBootstrapper, IdentityCounts
from supplydb.shared.seeder.relations import RelationCounts, RelationSeeder
from supplydb.shared.seeder.sources import SeedSource

if TYPE_CHECKING:
    from supplydb.shared.seeder.config import SeederConfig

logger = get_logger(__name__)

# Integrity checks run by verify_data_integrity: (description, count query).
INTEGRITY_CHECKS: list[tuple[str, str]] = [
    (
        "users linked to both a supplier and a client",
        "SELECT COUNT(*) FROM users WHERE supplier_id IS NOT NULL AND client_id IS NOT NULL",
    ),
    (
        "product requirements with a non-positive count",
        "SELECT COUNT(*) FROM product_requirements WHERE count <= 0",
    ),
    (
        "product locations with a non-positive count",
        "SELECT COUNT(*) FROM product_locations WHERE count <= 0",
    ),
    (
        "suppliers without a valid country",
        """
        SELECT COUNT(*) FROM suppliers s
        LEFT JOIN countries c ON s.country_id = c.country_id
        WHERE c.country_id IS NULL
        """,
    ),
    (
        "products without a valid supplier or subcategory",
        """
        SELECT COUNT(*) FROM products p
        LEFT JOIN suppliers s ON p.supplier_id = s.supplier_id
        LEFT JOIN product_subcategories ps ON p.subcategory_id = ps.subcategory_id
        WHERE s.supplier_id IS NULL OR ps.subcategory_id IS NULL
        """,
    ),
    (
        "supplier users whose name differs from their supplier",
        """
        SELECT COUNT(*) FROM users u
        JOIN suppliers s ON u.supplier_id = s.supplier_id
        WHERE u.name <> s.name
        """,
    ),
    (
        "client users whose name differs from their client",
        """
        SELECT COUNT(*) FROM users u
        JOIN clients c ON u.client_id = c.client_id
        WHERE u.name <> c.name
        """,
    ),
]


@dataclass
class SeederResult:
    """Result of a seeder operation.

    Attributes:
        entities: Base entity row counts.
        relations: Sparse relation row counts.
        identities: Role and user row counts.
        product_sample_size: Bound used for the relation product subset.
    """

    entities: EntityCounts = field(default_factory=EntityCounts)
    relations: RelationCounts = field(default_factory=RelationCounts)
    identities: IdentityCounts = field(default_factory=IdentityCounts)
    product_sample_size: int = 10

    @property
    def total_rows(self) -> int:
        """Total rows inserted across all tables."""
        entities = self.entities
        return (
            entities.countries
            + entities.suppliers
            + entities.clients
            + entities.categories
            + entities.subcategories
            + entities.products
            + entities.warehouses
            + entities.client_addresses
            + self.relations.product_requirements
            + self.relations.product_locations
            + self.identities.roles
            + self.identities.users
        )


@dataclass
class InitializationResult:
    """Outcome of a full provision-and-seed run."""

    provision: ProvisionResult
    seed: SeederResult


class DataSeeder:
    """Orchestrates deterministic data generation for the supply-chain schema.

    Phases run in dependency order: entities, relations, identities. All three
    share one transaction, so a failed run leaves the freshly created tables
    empty rather than partially seeded.
    """

    def __init__(self, config: SeederConfig, source: SeedSource | None = None) -> None:
        """Initialize the data seeder.

        Args:
            config: Seeder configuration.
            source: Seed lists; the packaged defaults when omitted.
        """
        self.config = config
        self.source = source or SeedSource()

    async def generate_full(self, conn: AsyncConnection) -> SeederResult:
        """Populate a freshly provisioned schema.

        Args:
            conn: Connection with no transaction in progress.

        Returns:
            SeederResult with counts of generated records.

        Raises:
            ExhaustionError: If a round-robin target list is empty.
            IntegrityViolation: If an insert breaks a constraint.
            QueryError: For any other database failure.
        """
        logger.info(
            "seeder.full_generation.started",
            countries=len(self.source.countries),
            suppliers=len(self.source.suppliers),
            clients=len(self.source.clients),
            products=len(self.source.products),
            product_sample_size=self.config.product_sample_size,
        )

        with translate_db_errors("seed"):
            async with conn.begin():
                entities = await EntitySeeder(self.config, self.source).seed(conn)
                relations = await RelationSeeder(self.config).seed(conn)
                identities = await IdentityBootstrapper(self.config, self.source).seed(conn)

        result = SeederResult(
            entities=entities,
            relations=relations,
            identities=identities,
            product_sample_size=self.config.product_sample_size,
        )

        logger.info(
            "seeder.full_generation.completed",
            suppliers=entities.suppliers,
            products=entities.products,
            requirements=relations.product_requirements,
            locations=relations.product_locations,
            users=identities.users,
            total_rows=result.total_rows,
        )

        return result

    async def get_current_counts(self, conn: AsyncConnection) -> dict[str, int]:
        """Get current row counts for every table in the schema.

        Args:
            conn: Connection with no transaction in progress.

        Returns:
            Dictionary of table names to row counts, in creation order.
        """
        counts: dict[str, int] = {}
        with translate_db_errors("count"):
            async with conn.begin():
                for table in registry.creation_order():
                    result = await conn.execute(select(func.count()).select_from(table))
                    counts[table.name] = result.scalar() or 0

        return counts

    async def verify_data_integrity(self, conn: AsyncConnection) -> list[str]:
        """Verify data integrity after generation.

        Checks:
        - No user is owned by both a supplier and a client
        - Relation rows never carry a zero or negative count
        - No orphaned suppliers or products
        - Supplier and client users are named after their owner

        Args:
            conn: Connection with no transaction in progress.

        Returns:
            List of error messages (empty if all checks pass).
        """
        errors: list[str] = []

        with translate_db_errors("verify"):
            async with conn.begin():
                for description, query in INTEGRITY_CHECKS:
                    result = await conn.execute(text(query))
                    count = result.scalar() or 0
                    if count > 0:
                        errors.append(f"Found {count} {description}")

        return errors


async def initialize_database(
    conn: AsyncConnection,
    config: SeederConfig,
    source: SeedSource | None = None,
) -> InitializationResult:
    """Drop and recreate the schema, then seed it.

    Args:
        conn: Open connection with no transaction in progress.
        config: Seeder configuration.
        source: Seed lists; the packaged defaults when omitted.

    Returns:
        InitializationResult with the provisioning and seeding outcomes.
    """
    provision = await Provisioner().provision(conn)
    seed = await DataSeeder(config, source).generate_full(conn)
    return InitializationResult(provision=provision, seed=seed)
