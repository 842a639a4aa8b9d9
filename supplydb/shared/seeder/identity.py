"""Role vocabulary and user account seeding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncConnection

from supplydb.core.logging import get_logger
from supplydb.features.schema.models import Client, Supplier, User, UserRole
from supplydb.shared.seeder.generators import (
    RoleName,
    UserAccount,
    admin_account,
    client_accounts,
    manager_accounts,
    role_records,
    supplier_accounts,
)
from supplydb.shared.seeder.queries import batch_insert, fetch_id_name_pairs

if TYPE_CHECKING:
    from supplydb.shared.seeder.config import SeederConfig
    from supplydb.shared.seeder.sources import SeedSource

logger = get_logger(__name__)


@dataclass
class IdentityCounts:
    """Rows inserted for roles and each kind of user."""

    roles: int = 0
    admins: int = 0
    managers: int = 0
    supplier_users: int = 0
    client_users: int = 0

    @property
    def users(self) -> int:
        """Total user accounts."""
        return self.admins + self.managers + self.supplier_users + self.client_users


class IdentityBootstrapper:
    """Creates roles and accounts: admin, managers, one per supplier and client.

    Passwords are hashed in the database with pgcrypto's crypt()/gen_salt()
    as part of the insert; plaintext is never written.
    """

    def __init__(self, config: SeederConfig, source: SeedSource) -> None:
        """Initialize the identity bootstrapper.

        Args:
            config: Seeder configuration (default password, hash algorithm).
            source: Seed lists holding the admin credential and manager roster.
        """
        self.config = config
        self.source = source

    async def seed(self, conn: AsyncConnection) -> IdentityCounts:
        """Insert roles, then every account.

        Args:
            conn: Connection with an open transaction, pgcrypto enabled.

        Returns:
            IdentityCounts with rows inserted.

        Raises:
            IntegrityViolation: If an account would belong to both a supplier
                and a client.
        """
        counts = IdentityCounts()

        counts.roles = await batch_insert(conn, UserRole, role_records(), self.config.batch_size)
        role_ids = await self._role_ids(conn)

        counts.admins = await self._insert_accounts(
            conn, role_ids, [admin_account(self.source.admin)]
        )
        counts.managers = await self._insert_accounts(
            conn, role_ids, manager_accounts(self.source.managers)
        )

        suppliers = await fetch_id_name_pairs(conn, Supplier.id, Supplier.name)
        counts.supplier_users = await self._insert_accounts(
            conn, role_ids, supplier_accounts(suppliers, self.config.default_password)
        )

        clients = await fetch_id_name_pairs(conn, Client.id, Client.name)
        counts.client_users = await self._insert_accounts(
            conn, role_ids, client_accounts(clients, self.config.default_password)
        )

        logger.info(
            "seeder.users.inserted",
            roles=counts.roles,
            admins=counts.admins,
            managers=counts.managers,
            supplier_users=counts.supplier_users,
            client_users=counts.client_users,
        )

        return counts

    async def _role_ids(self, conn: AsyncConnection) -> dict[RoleName, int]:
        result = await conn.execute(select(UserRole.name, UserRole.id))
        return {RoleName(row[0]): row[1] for row in result.fetchall()}

    async def _insert_accounts(
        self,
        conn: AsyncConnection,
        role_ids: dict[RoleName, int],
        accounts: list[UserAccount],
    ) -> int:
        for account in accounts:
            await conn.execute(
                insert(User).values(
                    name=account.name,
                    user_role_id=role_ids[account.role],
                    supplier_id=account.supplier_id,
                    client_id=account.client_id,
                    password_hash=func.crypt(
                        account.password, func.gen_salt(self.config.hash_algorithm)
                    ),
                )
            )
        return len(accounts)
