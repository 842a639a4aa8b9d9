"""Sparse relation generator (product requirements, product locations).

Quantities come from a fixed formula over the two identifiers instead of a
random source, so a rerun against a fresh database produces the same rows.
A quantity of zero means "no relation" and produces no row.
"""

from __future__ import annotations

from collections.abc import Sequence

COUNT_MULTIPLIER = 73
COUNT_OFFSET = 42
COUNT_MODULUS = 300

_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31


def wrap_i32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)."""
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def synthetic_count(x: int, y: int) -> int:
    """Deterministic quantity for the identifier pair (x, y).

    count = (x * 73 + (y + 42)) mod 300, with each intermediate step wrapped
    to 32 bits. The final modulo is floored, so the result is in [0, 299]
    even when wraparound produced a negative intermediate.

    Args:
        x: Owner identifier (client address or warehouse).
        y: Product identifier.

    Returns:
        Quantity; 0 means the pair gets no row.
    """
    total = wrap_i32(wrap_i32(x * COUNT_MULTIPLIER) + wrap_i32(y + COUNT_OFFSET))
    return total % COUNT_MODULUS


class RelationGenerator:
    """Generator for owner x product relation rows."""

    def __init__(self, owner_key: str) -> None:
        """Initialize the relation generator.

        Args:
            owner_key: Column holding the owner id ("client_address_id" or
                "warehouse_id").
        """
        self.owner_key = owner_key

    def generate(
        self,
        owner_ids: Sequence[int],
        product_ids: Sequence[int],
    ) -> list[dict[str, int]]:
        """Generate relation records for every owner against every product.

        Iterates owners in the outer loop and products in the inner loop, in
        the order given; pairs whose count is zero are skipped.

        Args:
            owner_ids: Owner identifiers.
            product_ids: Bounded product identifier subset.

        Returns:
            List of relation dictionaries ready for database insertion.
        """
        records: list[dict[str, int]] = []

        for owner_id in owner_ids:
            for product_id in product_ids:
                count = synthetic_count(owner_id, product_id)
                if count == 0:
                    continue
                records.append(
                    {
                        self.owner_key: owner_id,
                        "product_id": product_id,
                        "count": count,
                    }
                )

        return records
