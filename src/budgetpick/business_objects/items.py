# -*- coding: utf-8 -*-
"""
Item model for budgeted selection.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Sequence
from .errors import StateValidationError


@dataclass(frozen=True)
class Item:
    """
    An item that can be selected at most once.

    Attributes
    ----------
    description : str
        Human-readable label, e.g. "new enchanted helmet". Must be non-empty.
    cost : float
        Strictly positive budget consumption.
    value : float
        Objective contribution if selected. Expected to be nonnegative;
        loaders drop negative values, the model itself does not check it.
    """
    description: str
    cost: float
    value: float

    def __post_init__(self) -> None:  # type: ignore[override]
        if not self.description:
            raise StateValidationError("Item.description must be non-empty.")
        if not (self.cost > 0 and math.isfinite(self.cost)):
            raise StateValidationError(f"Item[{self.description}] cost must be finite and > 0.")


# Ordered, read-only view of items. Identity is positional.
ItemSequence = Sequence[Item]
