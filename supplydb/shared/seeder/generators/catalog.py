"""Row builders for base entities (countries, suppliers, clients, products, ...).

Builders are pure: they take seed lists and already stored identifiers and
return dictionaries ready for insertion.
"""

from __future__ import annotations

from collections.abc import Sequence

from supplydb.shared.seeder.assign import assign_round_robin


def country_records(countries: Sequence[str]) -> list[dict[str, str]]:
    """One row per country name, in list order."""
    return [{"name": name} for name in countries]


def supplier_records(
    names: Sequence[str],
    emails: Sequence[str],
    country_ids: Sequence[int],
) -> list[dict[str, str | int]]:
    """Suppliers with a country each.

    Names and emails are zipped positionally (truncated to the shorter list);
    countries are assigned round-robin.

    Raises:
        ExhaustionError: If there are no countries.
    """
    pairs = assign_round_robin(zip(names, emails, strict=False), country_ids, label="countries")
    return [
        {"country_id": country_id, "name": name, "email": email}
        for (name, email), country_id in pairs
    ]


def client_records(names: Sequence[str], emails: Sequence[str]) -> list[dict[str, str]]:
    """Clients from names zipped positionally with emails."""
    return [{"name": name, "email": email} for name, email in zip(names, emails, strict=False)]


def subcategory_records(category_id: int, subcategories: Sequence[str]) -> list[dict[str, str | int]]:
    """Subcategory rows referencing a freshly inserted category."""
    return [{"category_id": category_id, "name": name} for name in subcategories]


def product_records(
    names: Sequence[str],
    subcategory_ids: Sequence[int],
    supplier_ids: Sequence[int],
) -> list[dict[str, str | int]]:
    """Products with a subcategory and a supplier each.

    Subcategories and suppliers are cycled independently, so product i gets
    subcategory_ids[i % len] and supplier_ids[i % len].

    Raises:
        ExhaustionError: If there are no subcategories or no suppliers.
    """
    by_subcategory = assign_round_robin(names, subcategory_ids, label="product subcategories")
    by_supplier = assign_round_robin(names, supplier_ids, label="suppliers")
    return [
        {"supplier_id": supplier_id, "subcategory_id": subcategory_id, "name": name}
        for (name, subcategory_id), (_, supplier_id) in zip(
            by_subcategory, by_supplier, strict=True
        )
    ]


def warehouse_records(addresses: Sequence[str]) -> list[dict[str, str]]:
    """One warehouse per address, in list order."""
    return [{"address": address} for address in addresses]


def client_address_records(
    addresses: Sequence[str],
    client_ids: Sequence[int],
) -> list[dict[str, str | int]]:
    """Addresses distributed over clients round-robin.

    One row per address; a client may receive several addresses or none
    beyond the first pass.

    Raises:
        ExhaustionError: If there are no clients.
    """
    pairs = assign_round_robin(addresses, client_ids, label="clients")
    return [{"client_id": client_id, "address": address} for address, client_id in pairs]
