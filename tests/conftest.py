"""Shared pytest fixtures and test helpers for budgetpick tests."""

from __future__ import annotations

import random
from itertools import combinations
from pathlib import Path
from typing import Callable, List, Sequence

import pytest

from budgetpick.business_objects.items import Item


def _brute_force_best_value(items: Sequence[Item], budget: float) -> float:
    """Reference optimum computed independently of the bitmask encoder."""
    best = 0.0
    for k in range(len(items) + 1):
        for combo in combinations(items, k):
            cost = sum(it.cost for it in combo)
            value = sum(it.value for it in combo)
            if cost <= budget and value > best:
                best = value
    return best


def _random_items(seed: int, n: int) -> List[Item]:
    rng = random.Random(seed)
    return [
        Item(
            description=f"item-{seed}-{i}",
            cost=float(rng.randint(1, 40)),
            value=float(rng.randint(0, 100)),
        )
        for i in range(n)
    ]


@pytest.fixture
def brute_force() -> Callable[[Sequence[Item], float], float]:
    """Independent optimum oracle (itertools.combinations)."""
    return _brute_force_best_value


@pytest.fixture
def make_items() -> Callable[[int, int], List[Item]]:
    """Seeded random item generator: make_items(seed, n)."""
    return _random_items


@pytest.fixture
def classic_items() -> List[Item]:
    """Textbook instance: ratios 6.0, 5.0, 4.0."""
    return [
        Item("item0", 10.0, 60.0),
        Item("item1", 20.0, 100.0),
        Item("item2", 30.0, 120.0),
    ]


@pytest.fixture
def item_db(tmp_path: Path) -> Path:
    """Small `^`-separated item database with one invalid row."""
    path = tmp_path / "items.txt"
    path.write_text(
        "description^cost^value\n"
        "new enchanted helmet^120^45\n"
        "old iron gauntlets^35^12\n"
        "cursed ring^abc^3\n"
        "leather boots^20^6\n",
        encoding="utf-8",
    )
    return path
