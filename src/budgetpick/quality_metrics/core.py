# -*- coding: utf-8 -*-
"""
quality_metrics/core.py

Pure helpers to summarize and compare selection results.
- No side effects
- Works off item sequences and Solution objects

Public API:
  - sum_items(items) -> (total_cost, total_value)
  - render_solution(items_or_solution) -> str
  - compare_metrics(optimal, heuristic, budget) -> Dict[str, float]
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from budgetpick.business_objects.items import Item
from budgetpick.planning.solution import Solution


def _fmt(x: float) -> str:
    # 6 significant digits, no trailing zeros
    return f"{float(x):g}"


def sum_items(items: Iterable[Item]) -> Tuple[float, float]:
    """Total cost and total value of `items`."""
    total_cost = 0.0
    total_value = 0.0
    for it in items:
        total_cost += it.cost
        total_value += it.value
    return total_cost, total_value


def render_solution(items: Iterable[Item]) -> str:
    """
    Human-readable listing: one line per item, then the grand totals.

    Accepts a Solution as well, since it iterates over its items.
    """
    chosen: List[Item] = list(items)
    lines = ["*** Item Selection ***"]
    if not chosen:
        lines.append("[empty item list]")
        return "\n".join(lines)

    for it in chosen:
        lines.append(f"{it.description} ==> cost {_fmt(it.cost)}; value {_fmt(it.value)}")

    total_cost, total_value = sum_items(chosen)
    lines.append(f"> Grand total cost: {_fmt(total_cost)}")
    lines.append(f"> Grand total value: {_fmt(total_value)}")
    return "\n".join(lines)


def compare_metrics(optimal: Solution, heuristic: Solution, budget: float) -> Dict[str, float]:
    """
    Returns:
      {
        "Optimal Value": ...,
        "Heuristic Value": ...,
        "Value Gap": ...,            # optimal - heuristic
        "Quality Ratio": ...,        # heuristic / optimal (1.0 if optimal is 0)
        "Optimal Utilization": ...,  # percent of budget spent (0..100)
        "Heuristic Utilization": ...,
      }
    """
    opt_v = float(optimal.total_value)
    heu_v = float(heuristic.total_value)

    quality = 1.0 if opt_v == 0.0 else heu_v / opt_v

    def _util(sol: Solution) -> float:
        return 0.0 if budget <= 0 else (float(sol.total_cost) / float(budget)) * 100.0

    return {
        "Optimal Value": opt_v,
        "Heuristic Value": heu_v,
        "Value Gap": opt_v - heu_v,
        "Quality Ratio": float(quality),
        "Optimal Utilization": _util(optimal),
        "Heuristic Utilization": _util(heuristic),
    }
