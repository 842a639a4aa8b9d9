"""Round-robin pairing of assignees to targets."""

from collections.abc import Iterable, Sequence
from typing import TypeVar

from supplydb.core.exceptions import ExhaustionError

A = TypeVar("A")
T = TypeVar("T")


def assign_round_robin(
    assignees: Iterable[A],
    targets: Sequence[T],
    *,
    label: str = "targets",
) -> list[tuple[A, T]]:
    """Pair every assignee with a target, cycling the targets.

    Pair i is (assignees[i], targets[i % len(targets)]); assignee order is kept
    and every assignee gets exactly one target.

    Args:
        assignees: Items to assign, consumed in order.
        targets: Items to assign to; reused from the start when exhausted.
        label: Name of the target list, used in the error message.

    Returns:
        One (assignee, target) pair per assignee.

    Raises:
        ExhaustionError: If there are no targets, even when there are no assignees.
    """
    if not targets:
        raise ExhaustionError(
            f"Cannot assign round-robin: no {label} available",
            details={"targets": label},
        )

    size = len(targets)
    return [(assignee, targets[i % size]) for i, assignee in enumerate(assignees)]
