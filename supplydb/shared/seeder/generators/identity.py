"""Role vocabulary and user account builders."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from supplydb.core.exceptions import IntegrityViolation


class RoleName(str, Enum):
    """Fixed role vocabulary."""

    ADMIN = "admin"
    MANAGER = "manager"
    CLIENT = "client"
    SUPPLIER = "supplier"


@dataclass(frozen=True)
class UserAccount:
    """A user account about to be inserted.

    A user is owned by at most one supplier or one client. Building an account
    with both owners fails immediately.

    Attributes:
        name: Login name.
        password: Plaintext password; hashed by the database on insert.
        role: Role the account is bound to.
        supplier_id: Owning supplier, if any.
        client_id: Owning client, if any.
    """

    name: str
    password: str = field(repr=False)
    role: RoleName
    supplier_id: int | None = None
    client_id: int | None = None

    def __post_init__(self) -> None:
        if self.supplier_id is not None and self.client_id is not None:
            raise IntegrityViolation(
                f"User '{self.name}' cannot belong to both a supplier and a client",
                details={
                    "user": self.name,
                    "supplier_id": self.supplier_id,
                    "client_id": self.client_id,
                },
            )


def role_records() -> list[dict[str, str]]:
    """One row per role, in vocabulary order."""
    return [{"name": role.value} for role in RoleName]


def admin_account(credential: tuple[str, str]) -> UserAccount:
    """The single admin account."""
    name, password = credential
    return UserAccount(name=name, password=password, role=RoleName.ADMIN)


def manager_accounts(roster: Iterable[tuple[str, str]]) -> list[UserAccount]:
    """Manager accounts with no supplier or client linkage."""
    return [
        UserAccount(name=name, password=password, role=RoleName.MANAGER)
        for name, password in roster
    ]


def supplier_accounts(suppliers: Iterable[tuple[int, str]], password: str) -> list[UserAccount]:
    """One account per (supplier_id, supplier_name), named after the supplier."""
    return [
        UserAccount(name=name, password=password, role=RoleName.SUPPLIER, supplier_id=supplier_id)
        for supplier_id, name in suppliers
    ]


def client_accounts(clients: Iterable[tuple[int, str]], password: str) -> list[UserAccount]:
    """One account per (client_id, client_name), named after the client."""
    return [
        UserAccount(name=name, password=password, role=RoleName.CLIENT, client_id=client_id)
        for client_id, name in clients
    ]
