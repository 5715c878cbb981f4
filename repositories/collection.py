"""
repositories/collection.py
--------------------------
Batch retrieval over a record type.

A collection is named after its record type (`UserCollection` serves
`User`) or binds one explicitly through `model`. It holds no state: every
call resolves the record type, composes one SELECT, runs it and hydrates
one fresh record object per row.
"""

from typing import Any, Iterable, Mapping, Optional, Sequence

from db.connection import fetch_db
from models.base import DataModel, get_model
from query.builder import compose_select
from utils.logger import get_logger
from utils.naming import strip_collection_suffix

logger = get_logger(__name__)


class DataCollection:
    """Base class for `<Record>Collection` classes. Use the classmethods directly."""

    model: Optional[type[DataModel]] = None

    @classmethod
    def resolve_model(cls) -> Optional[type[DataModel]]:
        """
        Find the record type this collection serves.

        Returns:
            The explicit `model` if set, else the registered record type
            named like this class minus its `Collection` suffix, else None.
        """
        if cls.model is not None:
            return cls.model
        name = strip_collection_suffix(cls.__name__)
        return get_model(name) if name else None

    @classmethod
    def _peer(cls) -> Optional[DataModel]:
        model_cls = cls.resolve_model()
        if model_cls is None:
            logger.warning(f"No record type found for collection {cls.__name__}")
            return None
        return model_cls()

    # ── READ ──────────────────────────────────────────────

    @classmethod
    def get_all(cls, db=None) -> list:
        """
        Retrieve every record of the table, in storage order.

        Args:
            db: Optional Database to reuse; defaults to the process-wide handle.

        Returns:
            List of record objects (empty if unresolved or no rows).
        """
        peer = cls._peer()
        if peer is None:
            return []
        if db is None:
            db = fetch_db()
        return cls._get_collection(peer, peer.get_select_query(), db)

    @classmethod
    def get_with(
        cls,
        properties: Mapping[str, Any],
        order: Optional[Iterable[str]] = None,
        direction: str = "asc",
        limit: Optional[Sequence[Any]] = None,
        db=None,
    ) -> list:
        """
        Retrieve all records matching the passed property/value pairs.

        Args:
            properties: Property name to value. A list or tuple of values
                (or `OneOf`) is a membership test, anything else equality.
                Unknown properties are ignored.
            order: Property names to order by; unknown names are skipped.
            direction: 'asc' or 'desc', applied to every order column.
            limit: ``(cap,)`` or ``(cap, offset)``. Note the positions:
                ``(100, 1000)`` returns at most 100 rows after skipping 1000.
            db: Optional Database to reuse; defaults to the process-wide handle.

        Returns:
            List of matching record objects. Empty when `properties` is
            empty: use `get_all` to match everything.
        """
        if not properties:
            return []
        peer = cls._peer()
        if peer is None:
            return []
        if db is None:
            db = fetch_db()

        sql = compose_select(peer, db, properties, order, direction, limit)
        return cls._get_collection(peer, sql, db)

    @classmethod
    def get_one(
        cls,
        properties: Mapping[str, Any],
        order: Optional[Iterable[str]] = None,
        direction: str = "asc",
        offset: int = 0,
        coalesce: bool = True,
        db=None,
    ) -> Optional[DataModel]:
        """
        Retrieve the first record matching the passed property/value pairs.

        Args:
            offset: Number of matches to skip.
            coalesce: With several matches, return the first one if True,
                otherwise None. Callers use False to detect non-unique keys.

        Returns:
            The record object, or None.
        """
        # a cap of 1 would hide a second match from the uniqueness check
        cap = 1 if coalesce else 2
        results = cls.get_with(properties, order, direction, (cap, offset), db=db)
        if len(results) == 1 or (results and coalesce):
            return results[0]
        return None

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _get_collection(peer: DataModel, query: str, db) -> list:
        """Run a composed query and hydrate one new `peer`-class object per row."""
        logger.debug(f"Collection query: {query}")
        rows = db.query(query).fetch_all()
        if not rows:
            return []
        model_cls = type(peer)
        return [model_cls(db).hydrate(row, strict=True) for row in rows]
