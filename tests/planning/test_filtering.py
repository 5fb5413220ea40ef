"""Tests for pre-optimization filtering."""

from __future__ import annotations

from budgetpick.business_objects.items import Item
from budgetpick.planning.filtering import filter_for_policy, filter_items
from budgetpick.planning.policy import Policy


def _items() -> list[Item]:
    return [
        Item("zero", 1.0, 0.0),
        Item("small", 1.0, 0.5),
        Item("a", 1.0, 5.0),
        Item("huge", 1.0, 5000.0),
        Item("b", 1.0, 10.0),
        Item("c", 1.0, 20.0),
    ]


class TestFilterItems:
    def test_value_window_inclusive(self) -> None:
        kept = filter_items(_items(), 5.0, 10.0)
        assert [it.description for it in kept] == ["a", "b"]

    def test_nonpositive_values_always_dropped(self) -> None:
        kept = filter_items(_items(), -100.0, 100.0)
        assert "zero" not in [it.description for it in kept]

    def test_size_cap_keeps_first_matches(self) -> None:
        kept = filter_items(_items(), 1.0, 2500.0, total_size=2)
        assert [it.description for it in kept] == ["a", "b"]

    def test_zero_cap(self) -> None:
        assert filter_items(_items(), 1.0, 2500.0, total_size=0) == []

    def test_shares_item_objects(self) -> None:
        source = _items()
        kept = filter_items(source, 1.0, 2500.0)
        assert kept[0] is source[2]

    def test_returns_new_list(self) -> None:
        source = [Item("a", 1.0, 5.0)]
        kept = filter_items(source, 1.0, 10.0)
        assert kept == source
        assert kept is not source


class TestFilterForPolicy:
    def test_uses_policy_knobs(self) -> None:
        policy = Policy(min_value=1.0, max_value=15.0, max_items=1)
        assert [it.description for it in filter_for_policy(_items(), policy)] == ["a"]

    def test_default_policy_keeps_all_positive(self) -> None:
        kept = filter_for_policy(_items(), Policy())
        assert [it.description for it in kept] == ["a", "huge", "b", "c"]
