# -*- coding: utf-8 -*-
"""
Timing harness: compare optimizers across growing input sizes.

For each size i in 1..max_size:
  - exhaustive runs on the first i filtered items
  - greedy runs on the first greedy_scale * i filtered items
Each (algorithm, size) point is repeated `repeats` times (filter + solve,
timed together) and the mean wall-clock time is reported in milliseconds.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Dict, List

from budgetpick.business_objects.items import ItemSequence
from budgetpick.planning.filtering import filter_items
from budgetpick.planning.policy import Policy
from budgetpick.planning.selector import get_optimizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimingRow:
    """
    Attributes
    ----------
    algorithm : str
    size : int
        Sweep step (1-based).
    n_items : int
        Items actually handed to the optimizer after filtering.
    mean_ms : float
        Mean wall-clock time over all repeats.
    total_value : float
        Value of the solution from the last repeat.
    """
    algorithm: str
    size: int
    n_items: int
    mean_ms: float
    total_value: float


def time_point(
    items: ItemSequence,
    policy: Policy,
    algorithm: str,
    size: int,
    total_size: int,
    repeats: int = 10,
) -> TimingRow:
    """Time filter + optimize for one sweep step."""
    if repeats < 1:
        raise ValueError("repeats must be >= 1")

    opt = get_optimizer(algorithm)
    elapsed_ms = 0.0
    n_items = 0
    total_value = 0.0
    for _ in range(repeats):
        start = time.perf_counter()
        filtered = filter_items(items, policy.min_value, policy.max_value, total_size)
        sol = opt.optimize(filtered, policy.budget)
        elapsed_ms += (time.perf_counter() - start) * 1000.0
        n_items = len(filtered)
        total_value = sol.total_value

    return TimingRow(
        algorithm=algorithm,
        size=size,
        n_items=n_items,
        mean_ms=elapsed_ms / repeats,
        total_value=total_value,
    )


def run_benchmark(
    items: ItemSequence,
    policy: Policy,
    max_size: int = 20,
    repeats: int = 10,
    greedy_scale: int = 200,
) -> Dict[str, List[TimingRow]]:
    """
    Sweep both optimizers. Returns {"exhaustive": [...], "greedy": [...]},
    one TimingRow per size.
    """
    results: Dict[str, List[TimingRow]] = {"exhaustive": [], "greedy": []}
    for i in range(1, max_size + 1):
        ex = time_point(items, policy, "exhaustive", i, i, repeats)
        gr = time_point(items, policy, "greedy", i, greedy_scale * i, repeats)
        results["exhaustive"].append(ex)
        results["greedy"].append(gr)
        logger.info(
            "size=%d exhaustive=%.3fms (n=%d) greedy=%.3fms (n=%d)",
            i, ex.mean_ms, ex.n_items, gr.mean_ms, gr.n_items,
        )
    return results
