# -*- coding: utf-8 -*-
"""
Exhaustive solver: enumerate every subset and keep the best feasible one.

Pipeline per call:
  1) Guard the enumeration width (n < MAX_EXHAUSTIVE_ITEMS).
  2) Walk masks 0 .. 2**n - 1 in ascending order.
  3) A mask is a candidate iff its total cost fits the budget.
  4) Keep the candidate with strictly greater total value; the lowest mask
     wins exact ties because it is seen first.

Mask 0 (the empty subset) is always feasible for budget >= 0, so it is the
baseline when nothing else fits. Time is O(2**n * n); callers are expected
to filter the sequence down before calling (see planning.filtering).
"""

from __future__ import annotations
import logging

from budgetpick.business_objects.items import ItemSequence
from budgetpick.planning.solution import Solution
from budgetpick.planning.subset import (
    MAX_EXHAUSTIVE_ITEMS,
    decode_subset,
    select_items,
    subset_count,
)

logger = logging.getLogger(__name__)


def exhaustive_max_value(items: ItemSequence, budget: float) -> Solution:
    """
    Return the optimal subset of `items` whose total cost is <= `budget`.

    Raises
    ------
    AssertionError
        If `items` holds MAX_EXHAUSTIVE_ITEMS or more entries.
    """
    n = len(items)
    if n >= MAX_EXHAUSTIVE_ITEMS:
        raise AssertionError(
            f"exhaustive search needs fewer than {MAX_EXHAUSTIVE_ITEMS} items, got {n}"
        )

    if n == 0 or budget <= 0:
        return Solution.empty()

    costs = [float(it.cost) for it in items]
    values = [float(it.value) for it in items]

    best_mask = 0
    best_value = 0.0
    for mask in range(1, subset_count(n)):
        total_cost = 0.0
        total_value = 0.0
        for j in decode_subset(mask, n):
            total_cost += costs[j]
            total_value += values[j]
        if total_cost <= budget and total_value > best_value:
            best_value = total_value
            best_mask = mask

    solution = Solution.from_items(select_items(items, best_mask))
    logger.debug(
        "exhaustive: n=%d budget=%s best_mask=%d value=%s cost=%s",
        n, budget, best_mask, solution.total_value, solution.total_cost,
    )
    return solution


class ExhaustiveOptimizer:
    """Exact optimizer; see exhaustive_max_value."""

    name = "exhaustive"

    def optimize(self, items: ItemSequence, budget: float) -> Solution:
        return exhaustive_max_value(items, budget)
