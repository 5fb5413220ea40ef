# -*- coding: utf-8 -*-
"""
Pre-filter an item sequence before optimization.

Intended to:
  1) drop items with zero or negative value, which never help the objective;
  2) bound the input size for the exhaustive solver.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from budgetpick.business_objects.items import Item, ItemSequence
from budgetpick.planning.policy import Policy

logger = logging.getLogger(__name__)


def filter_items(
    source: ItemSequence,
    min_value: float,
    max_value: float,
    total_size: Optional[int] = None,
) -> List[Item]:
    """
    Return the first `total_size` items with value > 0 and
    min_value <= value <= max_value, in source order.

    Items are immutable, so the returned list shares them with `source`.
    """
    output: List[Item] = []
    for it in source:
        if total_size is not None and len(output) >= total_size:
            break
        v = it.value
        if v > 0 and min_value <= v <= max_value:
            output.append(it)

    logger.debug(
        "filter: kept %d of %d items (value in [%s, %s], cap=%s)",
        len(output), len(source), min_value, max_value, total_size,
    )
    return output


def filter_for_policy(source: ItemSequence, policy: Policy) -> List[Item]:
    """filter_items() driven by a Policy."""
    return filter_items(source, policy.min_value, policy.max_value, policy.max_items)
