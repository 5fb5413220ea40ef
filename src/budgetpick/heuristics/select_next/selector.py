# -*- coding: utf-8 -*-
"""
Select Next: pick the remaining item with the best value-to-cost ratio.

Direction rules (fixed):
  - ratio -> descending (higher first)
  - position -> ascending (first occurrence wins on exact ties)

The scan is linear and stable, so repeated calls on the same sequence
always return the same index.
"""

from __future__ import annotations
from typing import Sequence

from budgetpick.business_objects.items import Item
from .features import compute_item_features


def select_next(items: Sequence[Item]) -> int:
    """
    Return the index of the first item holding the maximum ratio.

    Raises
    ------
    ValueError
        If `items` is empty.
    """
    if not items:
        raise ValueError("select_next() needs at least one item.")

    best_idx = 0
    best_ratio = compute_item_features(items[0])["ratio"]
    for idx in range(1, len(items)):
        ratio = compute_item_features(items[idx])["ratio"]
        # strict '>' keeps the earliest index on ties
        if ratio > best_ratio:
            best_ratio = ratio
            best_idx = idx
    return best_idx
