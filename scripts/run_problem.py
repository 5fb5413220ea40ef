#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Run both optimizers on one item database and export the results.

This version does NOT use argparse.
Just set the variables at the top of the file and run:

    python scripts/run_problem.py
"""

from __future__ import annotations
import os
from typing import List

# ====== CONFIGURATION ======
ITEMS_PATH = "data/items.txt"
OUT_DIR = "reports/problem"

BUDGET = 1000.0

# Pre-filter: value window (inclusive) and size cap for the exhaustive run
MIN_VALUE = 1.0
MAX_VALUE = 2500.0
MAX_ITEMS = 20

VERBOSE = False
# ============================

from budgetpick.business_objects.items import Item
from budgetpick.planning import Policy, compare
from budgetpick.planning.filtering import filter_for_policy
from budgetpick.planning.tracker import Tracker
from budgetpick.quality_metrics.core import compare_metrics, render_solution
from budgetpick.utils.logging_setup import configure_logging
from budgetpick.utils.read_items import load_item_database


def main() -> None:
    configure_logging(verbose=VERBOSE)

    # Load and filter
    all_items: List[Item] = load_item_database(ITEMS_PATH)
    policy = Policy(budget=BUDGET, min_value=MIN_VALUE, max_value=MAX_VALUE, max_items=MAX_ITEMS)
    items = filter_for_policy(all_items, policy)

    # Same input, both optimizers
    results = compare(items, policy.budget)
    exhaustive = results["exhaustive"]
    greedy = results["greedy"]

    for res in (exhaustive, greedy):
        print(f"\n=== {res.algorithm} ({res.seconds * 1000:.3f} ms) ===")
        print(render_solution(res.solution))

    metrics = compare_metrics(exhaustive.solution, greedy.solution, policy.budget)
    print("\n=== Greedy vs exhaustive ===")
    for key, val in metrics.items():
        print(f"  - {key}: {val:.4f}")

    # Artifacts
    tracker = Tracker(out_dir=OUT_DIR)
    tracker.write_solution_csv(exhaustive.solution, filename="exhaustive_solution.csv")
    tracker.write_solution_csv(greedy.solution, filename="greedy_solution.csv")
    tracker.write_summary_csv(metrics)
    print(f"\nCSV artifacts written to: {os.path.abspath(OUT_DIR)}")


if __name__ == "__main__":
    main()
