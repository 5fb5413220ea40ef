# -*- coding: utf-8 -*-
"""
Run-time budget bookkeeping for a single optimization call.

Business (timeless) entities live in `business_objects/`; the container
below exists only while an optimizer runs and is never shared.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from budgetpick.business_objects.items import Item


@dataclass
class RuntimeBudget:
    """
    Mutable spend tracker used during greedy selection.

    Attributes
    ----------
    budget : float
        Cost ceiling for the run.
    spent : float
        Cost committed so far; only ever grows.
    """
    budget: float
    spent: float = field(default=0.0, init=False)

    @property
    def remaining(self) -> float:
        return self.budget - self.spent

    def can_fit(self, item: Item) -> bool:
        """Check if the item's cost fits on top of what is already spent."""
        return self.spent + item.cost <= self.budget

    def place(self, item: Item) -> bool:
        """
        Try to commit the item. Returns True if committed, False otherwise.
        No overspend is allowed.
        """
        if self.can_fit(item):
            self.spent += item.cost
            return True
        return False
