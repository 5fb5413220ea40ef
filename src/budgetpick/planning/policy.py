# -*- coding: utf-8 -*-
"""
Policy (configuration knobs) for a selection run.

Optimizer:
  - algorithm: "exhaustive" | "greedy"
  - budget:    cost ceiling handed to the optimizer

Pre-filtering (applied before the optimizer sees the items):
  - min_value / max_value: inclusive value window; nonpositive values are
    always dropped
  - max_items: keep only the first N matching items; None keeps all
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Policy:
    """
    Run knobs (pure data holder).

    Attributes
    ----------
    algorithm : str
        Registered optimizer name, see planning.selector.OPTIMIZERS.
    budget : float
        Cost ceiling.
    min_value : float
        Lower bound (inclusive) on item value.
    max_value : float
        Upper bound (inclusive) on item value.
    max_items : int | None
        Size cap after filtering.
    """
    algorithm: str = "exhaustive"
    budget: float = 2500.0

    min_value: float = 1.0
    max_value: float = float("inf")
    max_items: Optional[int] = None
