"""
models/base.py
--------------
Base class for record types: one subclass per table.

A record type declares its table and columns once. The column registry is
built and validated when the class is created, and the class is registered
by name so collections can find it by naming convention.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from utils.logger import get_logger
from utils.naming import is_safe_identifier

logger = get_logger(__name__)

_MODELS: dict[str, type["DataModel"]] = {}


class SchemaError(ValueError):
    """A record type declares an invalid table or column set."""


class HydrationError(KeyError):
    """A row is missing a column required by strict hydration."""


@dataclass(frozen=True)
class Column:
    """
    Metadata for one table column.

    Attributes:
        name: Physical snake_case column name.
        type: Informational SQL type name.
        primary_key: Whether the column is (part of) the primary key.
    """
    name: str
    type: str = "text"
    primary_key: bool = False


def get_model(name: str) -> Optional[type["DataModel"]]:
    """Look up a registered record type by class name."""
    return _MODELS.get(name)


class DataModel:
    """
    A row of `table`, with one attribute per declared column.

    Subclasses set `table` and `columns`; `registry` is derived from them.
    """

    table: str = ""
    columns: tuple[Column, ...] = ()
    registry: dict[str, Column] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if not cls.table:
            return
        cls.registry = _build_registry(cls)
        if cls.__name__ in _MODELS and _MODELS[cls.__name__] is not cls:
            logger.warning(f"Record type {cls.__name__} re-registered by {cls.__module__}")
        _MODELS[cls.__name__] = cls

    def __init__(self, db=None, **values: Any):
        self.db = db
        for name in self.registry:
            setattr(self, name, None)
        for name, value in values.items():
            if name not in self.registry:
                raise TypeError(f"{type(self).__name__} has no column '{name}'")
            setattr(self, name, value)

    def get_select_query(self) -> str:
        """Base SELECT for this table, without WHERE, ORDER BY or LIMIT."""
        cols = ", ".join(f'"{name}"' for name in self.registry)
        return f'SELECT {cols} FROM "{self.table}"'

    def hydrate(self, row: Mapping[str, Any], strict: bool = False) -> "DataModel":
        """
        Populate column attributes from a database row.

        Args:
            row: Column name to value mapping. Extra keys are ignored.
            strict: Require every registered column to be present.

        Returns:
            self, for chaining.

        Raises:
            HydrationError: In strict mode, when a column is missing from the row.
        """
        for name in self.registry:
            if name in row:
                setattr(self, name, row[name])
            elif strict:
                raise HydrationError(f"Row for {type(self).__name__} lacks column '{name}'")
        return self

    def to_dict(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.registry}

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        # primary key only: other column values may be unhashable
        keys = [c.name for c in self.registry.values() if c.primary_key] or list(self.registry)
        return hash((type(self), tuple(getattr(self, name) for name in keys)))

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"{type(self).__name__}({fields})"


def _build_registry(cls: type[DataModel]) -> dict[str, Column]:
    if not is_safe_identifier(cls.table):
        raise SchemaError(f"{cls.__name__}: invalid table name '{cls.table}'")
    if not cls.columns:
        raise SchemaError(f"{cls.__name__}: no columns declared")
    registry: dict[str, Column] = {}
    for col in cls.columns:
        if not is_safe_identifier(col.name):
            raise SchemaError(f"{cls.__name__}: invalid column name '{col.name}'")
        if col.name in registry:
            raise SchemaError(f"{cls.__name__}: duplicate column '{col.name}'")
        # columns live on the instance, so they must not shadow class members
        if col.name == "db" or hasattr(cls, col.name):
            raise SchemaError(f"{cls.__name__}: column name '{col.name}' is reserved")
        registry[col.name] = col
    return registry
