"""
query/builder.py
----------------
Composes a single SELECT for a record type from filter, order and limit
criteria.

Column identifiers only ever come from the record type's validated
registry; every value goes through `db.quote()` before it reaches the SQL.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

from models.base import DataModel
from query.filters import Equals, as_condition
from utils.naming import convert_from_camel_case


def resolve_column(model: DataModel, prop: str) -> Optional[str]:
    """Map a logical property name to a registered column, or None."""
    col = convert_from_camel_case(prop)
    return col if col in model.registry else None


def build_where(model: DataModel, properties: Mapping[str, Any], db) -> str:
    """
    Build the WHERE clause for the honoured filter entries.

    Unknown properties and empty value lists are dropped. If nothing is
    left, the clause is omitted entirely.

    Returns:
        ``' WHERE ...'`` or an empty string.
    """
    clauses = []
    for prop, value in properties.items():
        col = resolve_column(model, prop)
        if col is None:
            continue
        cond = as_condition(value)
        if cond is None:
            continue
        if isinstance(cond, Equals):
            if cond.value is None:
                clauses.append(f'"{col}" IS NULL')
            else:
                clauses.append(f'"{col}" = {db.quote(cond.value)}')
        else:
            in_list = ", ".join(db.quote(v) for v in cond.values)
            clauses.append(f'"{col}" IN ({in_list})')

    if not clauses:
        return ""
    return " WHERE " + " AND ".join(clauses)


def build_order(model: DataModel, order: Iterable[str], direction: str = "asc") -> str:
    """
    Build the ORDER BY clause over the valid property names.

    One direction applies to every column: DESC for "desc", ASC for
    anything else.
    """
    keyword = "DESC" if str(direction).lower() == "desc" else "ASC"
    cols = []
    for prop in order or ():
        col = resolve_column(model, prop)
        if col is not None:
            cols.append(f'"{col}" {keyword}')
    if not cols:
        return ""
    return " ORDER BY " + ", ".join(cols)


def _as_bound(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def build_limit(limit: Optional[Sequence[Any]]) -> str:
    """
    Build the LIMIT clause.

    Element 0 is the row cap and element 1, when present, the secondary
    bound, rendered as OFFSET. So ``(100, 1000)`` yields at most 100 rows
    after skipping 1000, not "1000 rows after the first 100".

    A non-numeric element 0 drops the clause; a non-numeric element 1 is
    ignored.
    """
    if not limit:
        return ""
    cap = _as_bound(limit[0])
    if cap is None:
        return ""
    chunk = f" LIMIT {cap}"
    if len(limit) > 1:
        bound = _as_bound(limit[1])
        if bound is not None:
            chunk += f" OFFSET {bound}"
    return chunk


def compose_select(
    model: DataModel,
    db,
    properties: Mapping[str, Any],
    order: Optional[Iterable[str]] = None,
    direction: str = "asc",
    limit: Optional[Sequence[Any]] = None,
) -> str:
    """Base SELECT + WHERE + ORDER BY + LIMIT, in that order."""
    return (
        model.get_select_query()
        + build_where(model, properties, db)
        + build_order(model, order or (), direction)
        + build_limit(limit)
    )
