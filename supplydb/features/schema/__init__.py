"""Schema slice: supply-chain models, table registry and provisioner."""

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
from supplydb.features.schema.provisioner import Provisioner, ProvisionResult

__all__ = [
    "Client",
    "ClientAddress",
    "Country",
    "Product",
    "ProductCategory",
    "ProductLocation",
    "ProductRequirement",
    "ProductSubcategory",
    "ProvisionResult",
    "Provisioner",
    "Supplier",
    "User",
    "UserRole",
    "Warehouse",
]
