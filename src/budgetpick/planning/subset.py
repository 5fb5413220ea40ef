# -*- coding: utf-8 -*-
"""
Subset encoding over integer bitmasks.

Bit j of a mask (bit 0 = least significant) selects item j of a sequence.
For a fixed n this is a bijection between range(2**n) and the power set of
{0, ..., n-1}; mask 0 is the empty subset.
"""

from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

from budgetpick.business_objects.items import Item

# Exhaustive enumeration is restricted to sequences shorter than this.
MAX_EXHAUSTIVE_ITEMS: int = 64


def subset_count(n: int) -> int:
    """Number of subsets of an n-item sequence."""
    return 1 << n


def decode_subset(mask: int, n: int) -> Tuple[int, ...]:
    """Return the ascending indices j < n whose bit is set in `mask`."""
    return tuple(j for j in range(n) if (mask >> j) & 1)


def encode_subset(indices: Iterable[int]) -> int:
    """Inverse of decode_subset: fold indices into a bitmask."""
    mask = 0
    for j in indices:
        mask |= 1 << j
    return mask


def select_items(items: Sequence[Item], mask: int) -> List[Item]:
    """Items designated by `mask`, in sequence order."""
    return [items[j] for j in decode_subset(mask, len(items))]
