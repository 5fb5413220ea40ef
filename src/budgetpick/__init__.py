# -*- coding: utf-8 -*-
"""
budgetpick: pick the most valuable set of items that fits a cost budget.

Two optimizers share one call shape, `optimize(items, budget) -> Solution`:
  - "exhaustive": exact, enumerates every subset (fewer than 64 items)
  - "greedy":     best value/cost ratio first, fast but not optimal
"""

from budgetpick.business_objects import Item, SchemaError, StateValidationError
from budgetpick.planning import Policy, Solution, compare, get_optimizer, optimize

__version__ = "0.1.0"

__all__ = [
    "Item",
    "SchemaError",
    "StateValidationError",
    "Policy",
    "Solution",
    "compare",
    "get_optimizer",
    "optimize",
]
