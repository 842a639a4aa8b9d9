"""Row generators for base entities, sparse relations and identities."""

from supplydb.shared.seeder.generators.catalog import (
    client_address_records,
    client_records,
    country_records,
    product_records,
    subcategory_records,
    supplier_records,
    warehouse_records,
)
from supplydb.shared.seeder.generators.identity import (
    RoleName,
    UserAccount,
    admin_account,
    client_accounts,
    manager_accounts,
    role_records,
    supplier_accounts,
)
from supplydb.shared.seeder.generators.relations import (
    RelationGenerator,
    synthetic_count,
    wrap_i32,
)

__all__ = [
    "RelationGenerator",
    "RoleName",
    "UserAccount",
    "admin_account",
    "client_accounts",
    "client_address_records",
    "client_records",
    "country_records",
    "manager_accounts",
    "product_records",
    "role_records",
    "subcategory_records",
    "supplier_accounts",
    "supplier_records",
    "synthetic_count",
    "warehouse_records",
    "wrap_i32",
]
