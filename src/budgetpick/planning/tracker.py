# -*- coding: utf-8 -*-
"""
Planning tracker: CSV artifacts for selection runs and timing sweeps.

Files produced (when Tracker is used):
  - solution.csv   (selected items; written by write_solution_csv)
  - summary.csv    (optimal vs heuristic KPIs; written by write_summary_csv)
  - timings.csv    (mean wall-clock per algorithm and size; write_timings_csv)

Notes
-----
- Callers decide when to invoke these writers; nothing is written implicitly.
"""

from __future__ import annotations
import csv
import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable, Protocol

from budgetpick.heuristics.select_next.features import build_ratio_table
from budgetpick.planning.solution import Solution

logger = logging.getLogger(__name__)


class TimingRecord(Protocol):
    algorithm: str
    size: int
    n_items: int
    mean_ms: float
    total_value: float


@dataclass
class Tracker:
    """
    Thin, opt-in artifact writer. Callers control when/where to dump.
    """
    out_dir: str

    def __post_init__(self) -> None:  # type: ignore[override]
        os.makedirs(self.out_dir, exist_ok=True)

    def _path(self, filename: str) -> str:
        os.makedirs(self.out_dir, exist_ok=True)
        return os.path.join(self.out_dir, filename)

    def write_solution_csv(self, solution: Solution, filename: str = "solution.csv") -> str:
        """
        Persist the selected items to CSV.

        Columns:
          order_index, description, cost, value, ratio
        """
        path = self._path(filename)
        ratios = build_ratio_table(solution.items)

        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["order_index", "description", "cost", "value", "ratio"])
            for idx, (it, ratio) in enumerate(zip(solution.items, ratios)):
                w.writerow([idx, it.description, float(it.cost), float(it.value), ratio])

        logger.debug("wrote %d solution rows to %s", len(solution), path)
        return path

    def write_summary_csv(self, metrics: Dict[str, float], filename: str = "summary.csv") -> str:
        """
        One row of KPIs; column order follows the dict.
        """
        path = self._path(filename)
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(list(metrics.keys()))
            w.writerow([float(v) for v in metrics.values()])
        return path

    def write_timings_csv(self, rows: Iterable[TimingRecord], filename: str = "timings.csv") -> str:
        """
        Columns:
          algorithm, size, n_items, mean_ms, total_value
        """
        path = self._path(filename)
        count = 0
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["algorithm", "size", "n_items", "mean_ms", "total_value"])
            for r in rows:
                w.writerow([r.algorithm, r.size, r.n_items, round(r.mean_ms, 6), r.total_value])
                count += 1

        logger.debug("wrote %d timing rows to %s", count, path)
        return path
