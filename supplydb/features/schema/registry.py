"""Static description of the schema: tables, their order and FK edges."""

from sqlalchemy import Index, Table

from supplydb.features.schema.models import (
    Client,
    ClientAddress,
    Country,
    Product,
    ProductCategory,
    ProductLocation,
    ProductRequirement,
    ProductSubcategory,
    Supplier,
    User,
    UserRole,
    Warehouse,
)

# Creation order: every table comes after the tables it references.
TABLES: tuple[type, ...] = (
    Country,
    Supplier,
    ProductCategory,
    ProductSubcategory,
    Product,
    Client,
    ClientAddress,
    ProductRequirement,
    Warehouse,
    ProductLocation,
    UserRole,
    User,
)

# Extensions the users table needs before hashed credentials can be stored.
REQUIRED_EXTENSIONS: tuple[str, ...] = ("pgcrypto",)


def creation_order() -> list[Table]:
    """Tables in the order they must be created."""
    return [model.__table__ for model in TABLES]


def drop_order() -> list[Table]:
    """Tables in the order they are dropped (dependents first)."""
    return list(reversed(creation_order()))


def table_names() -> list[str]:
    """Names of all known tables, in creation order."""
    return [table.name for table in creation_order()]


def dependencies(table: Table) -> set[str]:
    """Names of the tables `table` references through foreign keys.

    Args:
        table: Table to inspect.

    Returns:
        Referenced table names, excluding self-references.
    """
    return {
        fk.column.table.name for fk in table.foreign_keys if fk.column.table is not table
    }


def table_indexes() -> list[Index]:
    """Secondary indexes, created after the tables exist.

    Sorted by name so creation order is stable between runs.
    """
    indexes: list[Index] = []
    for table in creation_order():
        indexes.extend(sorted(table.indexes, key=lambda index: index.name or ""))
    return indexes
