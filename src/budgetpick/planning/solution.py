# -*- coding: utf-8 -*-
"""
Solution model for budgeted selection results.

A Solution is produced by one of the optimizers and consumed by the
metrics/reporting layers. Aggregates are always derived from the selected
items, never supplied by hand.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from budgetpick.business_objects.items import Item


@dataclass(frozen=True)
class Solution:
    """
    Selected items plus their aggregates.

    Attributes
    ----------
    items : tuple[Item, ...]
        Selected items, in the order the optimizer emitted them.
    total_cost : float
        Sum of costs of the selected items.
    total_value : float
        Sum of values of the selected items.
    """
    items: Tuple[Item, ...]
    total_cost: float
    total_value: float

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> "Solution":
        chosen = tuple(items)
        total_cost = 0.0
        total_value = 0.0
        for it in chosen:
            total_cost += it.cost
            total_value += it.value
        return cls(items=chosen, total_cost=total_cost, total_value=total_value)

    @classmethod
    def empty(cls) -> "Solution":
        return cls(items=(), total_cost=0.0, total_value=0.0)

    def is_feasible(self, budget: float) -> bool:
        return self.total_cost <= budget

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)
