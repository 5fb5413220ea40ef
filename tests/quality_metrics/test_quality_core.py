"""Tests for reporting and comparison metrics."""

from __future__ import annotations

import pytest

from budgetpick.business_objects.items import Item
from budgetpick.planning.solution import Solution
from budgetpick.quality_metrics.core import compare_metrics, render_solution, sum_items


class TestSumItems:
    def test_sums(self, classic_items: list[Item]) -> None:
        assert sum_items(classic_items) == (60.0, 280.0)

    def test_empty(self) -> None:
        assert sum_items([]) == (0.0, 0.0)


class TestRenderSolution:
    def test_empty(self) -> None:
        assert render_solution(Solution.empty()) == "*** Item Selection ***\n[empty item list]"

    def test_lists_items_and_totals(self) -> None:
        text = render_solution([Item("helmet", 12.5, 40.0), Item("boots", 20.0, 6.0)])
        assert text.splitlines() == [
            "*** Item Selection ***",
            "helmet ==> cost 12.5; value 40",
            "boots ==> cost 20; value 6",
            "> Grand total cost: 32.5",
            "> Grand total value: 46",
        ]

    def test_accepts_solution(self, classic_items: list[Item]) -> None:
        text = render_solution(Solution.from_items(classic_items))
        assert "> Grand total value: 280" in text


class TestCompareMetrics:
    def test_classic_gap(self, classic_items: list[Item]) -> None:
        optimal = Solution.from_items(classic_items[1:])
        heuristic = Solution.from_items(classic_items[:2])
        m = compare_metrics(optimal, heuristic, 50.0)
        assert m["Optimal Value"] == 220.0
        assert m["Heuristic Value"] == 160.0
        assert m["Value Gap"] == 60.0
        assert m["Quality Ratio"] == pytest.approx(160.0 / 220.0)
        assert m["Optimal Utilization"] == 100.0
        assert m["Heuristic Utilization"] == 60.0

    def test_zero_optimum_is_perfect_quality(self) -> None:
        m = compare_metrics(Solution.empty(), Solution.empty(), 0.0)
        assert m["Quality Ratio"] == 1.0
        assert m["Optimal Utilization"] == 0.0
