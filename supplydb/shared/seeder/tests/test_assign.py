"""Tests for round-robin assignment."""

import pytest

from supplydb.core.exceptions import ExhaustionError
from supplydb.shared.seeder.assign import assign_round_robin


class TestAssignRoundRobin:
    """Tests for assign_round_robin."""

    def test_one_pair_per_assignee(self):
        """Every assignee gets exactly one target, in order."""
        pairs = assign_round_robin(["a", "b", "c", "d", "e"], [10, 20])

        assert [a for a, _ in pairs] == ["a", "b", "c", "d", "e"]
        assert [t for _, t in pairs] == [10, 20, 10, 20, 10]

    def test_index_modulo_target_count(self):
        """Pair i uses target i mod m."""
        targets = [7, 8, 9, 11]
        pairs = assign_round_robin(range(23), targets)

        for i, (assignee, target) in enumerate(pairs):
            assert assignee == i
            assert target == targets[i % len(targets)]

    def test_three_countries_ten_suppliers(self):
        """Suppliers 0,3,6,9 share the first country; 1,4,7 the second; 2,5,8 the third."""
        suppliers = [f"s{i}" for i in range(10)]
        pairs = dict(assign_round_robin(suppliers, ["AT", "BE", "CA"]))

        assert [s for s, c in pairs.items() if c == "AT"] == ["s0", "s3", "s6", "s9"]
        assert [s for s, c in pairs.items() if c == "BE"] == ["s1", "s4", "s7"]
        assert [s for s, c in pairs.items() if c == "CA"] == ["s2", "s5", "s8"]

    def test_fewer_assignees_than_targets(self):
        """Extra targets are simply unused."""
        assert assign_round_robin(["x"], [1, 2, 3]) == [("x", 1)]

    def test_no_assignees(self):
        """No assignees yields no pairs."""
        assert assign_round_robin([], [1, 2]) == []

    def test_accepts_iterators(self):
        """Assignees may be a one-shot iterator."""
        pairs = assign_round_robin(zip(["a", "b"], ["x", "y"], strict=True), [1])

        assert pairs == [(("a", "x"), 1), (("b", "y"), 1)]

    def test_empty_targets_raises(self):
        """An empty target list is an error."""
        with pytest.raises(ExhaustionError) as exc_info:
            assign_round_robin(["a"], [], label="countries")

        assert "countries" in exc_info.value.message
        assert exc_info.value.details == {"targets": "countries"}

    def test_empty_targets_raises_without_assignees(self):
        """Exhaustion is reported even when nothing would be assigned."""
        with pytest.raises(ExhaustionError):
            assign_round_robin([], [])
