# -*- coding: utf-8 -*-
"""
Logging configuration for scripts.

The library only creates module loggers; handlers are installed here, on
the `budgetpick` logger, when a script asks for them.
"""

from __future__ import annotations
import logging
import sys

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Route `budgetpick.*` records to stderr.

    verbose=True enables DEBUG (per-step solver detail); otherwise INFO.
    Calling it again replaces the previous handler.
    """
    logger = logging.getLogger("budgetpick")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
