"""Tests for the selector facade."""

from __future__ import annotations

import logging

import pytest

from budgetpick.business_objects.items import Item
from budgetpick.planning import OPTIMIZERS, Policy, Solution, compare, get_optimizer, optimize
from budgetpick.planning.selector import optimize_with_policy


class TestGetOptimizer:
    def test_registry_names(self) -> None:
        assert list(OPTIMIZERS) == ["exhaustive", "greedy"]

    @pytest.mark.parametrize("name", ["exhaustive", "greedy", " greedy "])
    def test_lookup(self, name: str) -> None:
        assert get_optimizer(name).name == name.strip()

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError, match="Unknown algorithm 'dynamic'"):
            get_optimizer("dynamic")


class TestOptimize:
    def test_defaults_to_exhaustive(self, classic_items: list[Item]) -> None:
        assert optimize(classic_items, 50.0).total_value == 220.0

    def test_greedy(self, classic_items: list[Item]) -> None:
        assert optimize(classic_items, 50.0, algorithm="greedy").total_value == 160.0

    @pytest.mark.parametrize("algorithm", ["exhaustive", "greedy"])
    def test_empty_sequence_allowed(self, algorithm: str) -> None:
        assert optimize([], 10.0, algorithm=algorithm) == Solution.empty()

    def test_with_policy(self, classic_items: list[Item]) -> None:
        policy = Policy(algorithm="greedy", budget=50.0)
        assert optimize_with_policy(classic_items, policy).total_value == 160.0


class TestCompare:
    def test_runs_every_optimizer(self, classic_items: list[Item]) -> None:
        results = compare(classic_items, 50.0)
        assert list(results) == ["exhaustive", "greedy"]
        assert results["exhaustive"].solution.total_value == 220.0
        assert results["greedy"].solution.total_value == 160.0
        assert all(r.seconds >= 0.0 for r in results.values())
        assert all(name == r.algorithm for name, r in results.items())

    def test_logs_summary(self, classic_items: list[Item], caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="budgetpick")
        compare(classic_items, 50.0)
        messages = [r.getMessage() for r in caplog.records if r.name == "budgetpick.planning.selector"]
        assert any(m.startswith("exhaustive: value=220.0") for m in messages)
        assert any(m.startswith("greedy: value=160.0") for m in messages)
