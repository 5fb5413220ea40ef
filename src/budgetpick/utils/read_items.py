# -*- coding: utf-8 -*-
"""
I/O helpers for loading item sequences.

Two formats:
- item database : text, one header line, then `description^cost^value` rows
- items.json    : [{"description": "...", "cost": <number>, "value": <number>}, ...]

Both map directly to business_objects.items.Item.
"""

from __future__ import annotations
import json
import logging
import math
from typing import List, Optional

from budgetpick.business_objects.errors import SchemaError
from budgetpick.business_objects.items import Item

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
_FIELD_COUNT = 3


def _require(obj: dict, key: str, path: str) -> object:
    if key not in obj:
        raise SchemaError(f"{path}: missing required key '{key}' in object {obj}")
    return obj[key]


def _parse_row(fields: List[str]) -> Optional[Item]:
    """Item for a split row, or None when a value is unusable."""
    description = fields[0]
    try:
        cost = float(fields[1])
        value = float(fields[2])
    except ValueError:
        return None
    if not (math.isfinite(cost) and math.isfinite(value)):
        return None
    if not description or cost <= 0 or value < 0:
        return None
    return Item(description=description, cost=cost, value=value)


def load_item_database(path: str) -> List[Item]:
    """
    Load all valid items from a `^`-separated item database.

    Rows with unparsable or invalid values are skipped. A row with the
    wrong number of fields aborts the load with SchemaError.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise SchemaError(f"{path}: cannot open item database: {e}") from e

    items: List[Item] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        # First line is a header row
        if line_number == 1 or not line.strip():
            continue

        fields = line.split(FIELD_SEPARATOR)
        if len(fields) != _FIELD_COUNT:
            raise SchemaError(
                f"{path}:{line_number}: invalid field count; "
                f"want {_FIELD_COUNT} but got {len(fields)}: {line!r}"
            )

        it = _parse_row(fields)
        if it is None:
            skipped += 1
            logger.debug("%s:%d: skipping invalid row %r", path, line_number, line)
            continue
        items.append(it)

    logger.info("loaded %d items from %s (%d skipped)", len(items), path, skipped)
    return items


def read_items_json(path: str) -> List[Item]:
    """
    Load items from a JSON array. Each element must have:
      - description (str)
      - cost (number)
      - value (number)
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SchemaError(f"{path}: failed to read/parse JSON: {e}") from e

    if not isinstance(data, list):
        raise SchemaError(f"{path}: expected a JSON array.")

    items: List[Item] = []
    for idx, obj in enumerate(data, start=1):
        if not isinstance(obj, dict):
            raise SchemaError(f"{path}[{idx}]: expected an object.")
        try:
            description = str(_require(obj, "description", path))
            cost = float(_require(obj, "cost", path))
            value = float(_require(obj, "value", path))
            if not (math.isfinite(value) and value >= 0):
                raise SchemaError(f"{path}[{idx}]: value must be finite and >= 0, got {value}")
            items.append(Item(description=description, cost=cost, value=value))
        except SchemaError:
            raise
        except (TypeError, ValueError) as e:
            raise SchemaError(f"{path}[{idx}]: {e}") from e
    return items
