# -*- coding: utf-8 -*-
"""
Greedy solver: repeatedly take the best remaining value/cost ratio.

Pipeline per call:
  1) Copy the input into a working list; spend starts at 0.
  2) select_next() picks the first item with the maximum ratio.
  3) Accept it iff spend + cost <= budget.
  4) Remove it from the working list whether accepted or not; a rejected
     item is never reconsidered.
  5) Stop when the working list is empty.

The result is always feasible but not guaranteed optimal. Time is O(n**2).
"""

from __future__ import annotations
import logging
from typing import List

from budgetpick.business_objects.items import Item, ItemSequence
from budgetpick.heuristics.select_next.selector import select_next
from budgetpick.planning.solution import Solution
from budgetpick.planning.state import RuntimeBudget

logger = logging.getLogger(__name__)


def greedy_max_value(items: ItemSequence, budget: float) -> Solution:
    """
    Return a feasible subset of `items` chosen by descending ratio.

    Selected items are listed in acceptance order.
    """
    if not items or budget <= 0:
        return Solution.empty()

    source: List[Item] = list(items)
    rt = RuntimeBudget(budget=budget)
    output: List[Item] = []

    while source:
        idx = select_next(source)
        it = source.pop(idx)
        if rt.place(it):
            output.append(it)
        else:
            logger.debug(
                "greedy: rejected %r (cost=%s, remaining=%s)",
                it.description, it.cost, rt.remaining,
            )

    solution = Solution.from_items(output)
    logger.debug(
        "greedy: n=%d budget=%s picked=%d value=%s cost=%s",
        len(items), budget, len(output), solution.total_value, solution.total_cost,
    )
    return solution


class GreedyOptimizer:
    """Ratio heuristic; see greedy_max_value."""

    name = "greedy"

    def optimize(self, items: ItemSequence, budget: float) -> Solution:
        return greedy_max_value(items, budget)
