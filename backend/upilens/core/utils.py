"""
Core utilities for UPILens.
"""

from __future__ import annotations

import math
from collections.abc import Hashable, Mapping
from typing import Any


def record_field(record: Any, name: str) -> Any:
    """Read a field from a transaction record of any shape.

    Mappings (decoded JSON, plain dicts) are read by key, anything else by
    attribute. A missing field reads as None.

    Args:
        record: Transaction record (mapping, model or plain object)
        name: Field name, e.g. "amount" or "to"

    Returns:
        The field value, or None if the record has no such field
    """
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def group_key(label: Any) -> Hashable:
    """Return a key usable for grouping by a free-form label."""
    if isinstance(label, Hashable):
        try:
            hash(label)
        except TypeError:
            return str(label)
        return label
    return str(label)


def add_amounts(left: int | float, right: int | float) -> int | float:
    """Add two amounts the way float arithmetic would, without raising.

    Python refuses to mix a float with an int beyond float range
    (OverflowError). Such an int is treated as +/-inf instead, so the result
    saturates just as an overflowing float sum does.
    """
    try:
        return left + right
    except OverflowError:
        return _as_float(left) + _as_float(right)


def _as_float(value: int | float) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
