# -*- coding: utf-8 -*-
"""
Selector facade: both optimizers behind one call shape.

    optimize(items, budget, algorithm="exhaustive") -> Solution

The facade holds no selection logic of its own; it looks the optimizer up
by name and dispatches. `compare()` runs every registered optimizer on the
same input and records wall-clock time next to each Solution.
"""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from typing import Dict, Protocol

from budgetpick.business_objects.items import ItemSequence
from budgetpick.planning.policy import Policy
from budgetpick.planning.solution import Solution
from budgetpick.planning.solvers.exhaustive import ExhaustiveOptimizer
from budgetpick.planning.solvers.greedy import GreedyOptimizer

logger = logging.getLogger(__name__)


class Optimizer(Protocol):
    name: str

    def optimize(self, items: ItemSequence, budget: float) -> Solution:
        ...


OPTIMIZERS: Dict[str, Optimizer] = {
    ExhaustiveOptimizer.name: ExhaustiveOptimizer(),
    GreedyOptimizer.name: GreedyOptimizer(),
}


@dataclass(frozen=True)
class Comparison:
    """
    One optimizer's answer plus its running time.

    Attributes
    ----------
    algorithm : str
        Optimizer name.
    solution : Solution
        What it returned.
    seconds : float
        Wall-clock duration of the optimize() call.
    """
    algorithm: str
    solution: Solution
    seconds: float


def get_optimizer(name: str) -> Optimizer:
    key = str(name).strip()
    if key not in OPTIMIZERS:
        raise ValueError(
            f"Unknown algorithm '{key}'. "
            f"Allowed: {sorted(OPTIMIZERS)}"
        )
    return OPTIMIZERS[key]


def optimize(items: ItemSequence, budget: float, algorithm: str = "exhaustive") -> Solution:
    """
    Run the named optimizer. An empty sequence is valid input and yields
    the empty Solution.
    """
    return get_optimizer(algorithm).optimize(items, budget)


def optimize_with_policy(items: ItemSequence, policy: Policy) -> Solution:
    """optimize() using the algorithm and budget carried by a Policy."""
    return optimize(items, policy.budget, algorithm=policy.algorithm)


def compare(items: ItemSequence, budget: float) -> Dict[str, Comparison]:
    """
    Run every registered optimizer on the same input.

    Returns {algorithm_name: Comparison}, in registry order.
    """
    results: Dict[str, Comparison] = {}
    for name, opt in OPTIMIZERS.items():
        start = time.perf_counter()
        sol = opt.optimize(items, budget)
        elapsed = time.perf_counter() - start
        results[name] = Comparison(algorithm=name, solution=sol, seconds=elapsed)
        logger.info(
            "%s: value=%s cost=%s items=%d in %.6fs",
            name, sol.total_value, sol.total_cost, len(sol), elapsed,
        )
    return results
