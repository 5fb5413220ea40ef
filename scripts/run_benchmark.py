#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Time the exhaustive and greedy optimizers across growing input sizes.

For size i = 1..MAX_SIZE the exhaustive optimizer sees i items and the
greedy optimizer sees GREEDY_SCALE * i items. Each point is averaged over
REPEATS runs.

Outputs under OUT_DIR:
  - exhaustive_timings.csv
  - greedy_timings.csv

Usage:
  python scripts/run_benchmark.py
"""

from __future__ import annotations
import os

# ====== CONFIGURATION ======
ITEMS_PATH = "data/items.txt"
OUT_DIR    = "reports/benchmark"

BUDGET    = 2500.0
MIN_VALUE = 1.0
MAX_VALUE = 2500.0

MAX_SIZE     = 20    # sweep steps; exhaustive cost doubles per step
REPEATS      = 10
GREEDY_SCALE = 200

VERBOSE = False
# ===========================

from budgetpick.planning import Policy
from budgetpick.benchmarks.timing import run_benchmark
from budgetpick.planning.tracker import Tracker
from budgetpick.utils.logging_setup import configure_logging
from budgetpick.utils.read_items import load_item_database


def main() -> None:
    configure_logging(verbose=VERBOSE)

    items = load_item_database(ITEMS_PATH)
    policy = Policy(budget=BUDGET, min_value=MIN_VALUE, max_value=MAX_VALUE)

    results = run_benchmark(
        items,
        policy,
        max_size=MAX_SIZE,
        repeats=REPEATS,
        greedy_scale=GREEDY_SCALE,
    )

    tracker = Tracker(out_dir=OUT_DIR)
    for algorithm, rows in results.items():
        print(f"\nAverage time taken for {algorithm} in milliseconds\n")
        for row in rows:
            print(f" {row.size:>3}  n={row.n_items:<5} {row.mean_ms:.4f}")
        tracker.write_timings_csv(rows, filename=f"{algorithm}_timings.csv")

    print(f"\nTimings written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
