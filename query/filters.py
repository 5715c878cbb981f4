"""
query/filters.py
----------------
Filter conditions for collection queries.

Callers may state intent explicitly with `Equals` / `OneOf`, or pass raw
values, which `as_condition` coerces:

    "active"              -> Equals("active")
    ["active"]            -> Equals("active")
    ["active", "pending"] -> OneOf(("active", "pending"))
    {"pending", "active"} -> OneOf(("active", "pending"))
    []                    -> None (entry dropped)
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Equals:
    """Column equals a single value (`IS NULL` for None)."""
    value: Any


@dataclass(frozen=True)
class OneOf:
    """Column is one of several values."""
    values: tuple

    def __post_init__(self):
        values = self.values
        if isinstance(values, (str, bytes)):
            raise TypeError(f"OneOf expects a collection of values, got {type(values).__name__}")
        if isinstance(values, (set, frozenset)):
            values = _sorted_members(values)
        object.__setattr__(self, "values", tuple(values))


Condition = Union[Equals, OneOf]


def _sorted_members(values) -> tuple:
    try:
        return tuple(sorted(values))
    except TypeError:
        raise TypeError("set filter values must be mutually comparable") from None


def as_condition(value: Any) -> Optional[Condition]:
    """
    Normalize a filter value into a condition.

    Sets are sorted so the generated SQL is stable between runs.

    Returns:
        An Equals or OneOf, or None when there is nothing to match on.

    Raises:
        TypeError: For a set whose members cannot be ordered.
    """
    if isinstance(value, Equals):
        return value
    if isinstance(value, OneOf):
        values = value.values
    elif isinstance(value, (list, tuple)):
        values = tuple(value)
    elif isinstance(value, (set, frozenset)):
        values = _sorted_members(value)
    else:
        return Equals(value)

    if not values:
        return None
    if len(values) == 1:
        return Equals(values[0])
    return OneOf(values)
