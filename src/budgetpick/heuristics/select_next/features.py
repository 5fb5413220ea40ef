# -*- coding: utf-8 -*-
"""
Derived item features for greedy ranking.

This module computes per-item features used by the ratio heuristic.
It is intentionally pure/stateless and performs no mutation or I/O.
"""

from __future__ import annotations
from typing import Dict, Sequence
from budgetpick.business_objects.items import Item


def compute_item_features(item: Item) -> Dict[str, float]:
    """
    Compute derived features for a single item.

    Features:
      - cost:  raw cost
      - value: raw value
      - ratio: value/cost (cost is strictly positive by construction)
    """
    c = float(item.cost)
    v = float(item.value)
    return {
        "cost": c,
        "value": v,
        "ratio": v / c,
    }


def build_ratio_table(items: Sequence[Item]) -> list[float]:
    """
    Positional convenience: ratio of every item, in sequence order.
    """
    return [compute_item_features(it)["ratio"] for it in items]
