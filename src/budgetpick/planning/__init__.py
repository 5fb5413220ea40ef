# -*- coding: utf-8 -*-
"""
Planning layer public API.

This module exposes the core planning-time contracts:
  - Solution (result model) and RuntimeBudget (per-run spend tracker)
  - Policy configuration
  - The selector facade (optimize, compare, get_optimizer)

Solvers, the subset encoder, filtering and the tracker should be imported
explicitly from their modules when needed.
"""

from .solution import Solution
from .state import RuntimeBudget
from .policy import Policy
from .selector import Comparison, OPTIMIZERS, compare, get_optimizer, optimize

__all__ = [
    "Solution",
    "RuntimeBudget",
    "Policy",
    "Comparison",
    "OPTIMIZERS",
    "compare",
    "get_optimizer",
    "optimize",
]
