# -*- coding: utf-8 -*-
"""
Timing harness for comparing optimizers.
"""

from .timing import TimingRow, run_benchmark, time_point

__all__ = ["TimingRow", "run_benchmark", "time_point"]
