"""
db/database.py
--------------
The database handle consumed by collections.

A `Database` wraps one psycopg2 connection and exposes the two operations
the query layer needs: quoting a value into a safe SQL literal, and running
a composed statement.
"""

from typing import Any

import psycopg2
from psycopg2 import extensions, extras

from utils.logger import get_logger

logger = get_logger(__name__)


class ResultSet:
    """Rows produced by a single executed statement."""

    def __init__(self, cursor):
        self._cursor = cursor

    def fetch_all(self) -> list[dict]:
        """Fetch every remaining row as a dict and close the cursor."""
        try:
            return [dict(row) for row in self._cursor.fetchall()]
        finally:
            self._cursor.close()


class Database:
    """Handle around a psycopg2 connection (not owned: never closed here)."""

    def __init__(self, conn):
        self.conn = conn

    def quote(self, value: Any) -> str:
        """
        Render a value as an escaped SQL literal.

        psycopg2 performs the adaptation, so strings, numbers, dates,
        booleans and None are all handled with the connection's own rules.

        Args:
            value: Any value psycopg2 can adapt.

        Returns:
            The literal as text, e.g. ``'O''Brien'`` or ``42``.
        """
        with self.conn.cursor() as cur:
            literal = cur.mogrify("%s", (value,))
        return literal.decode(extensions.encodings.get(self.conn.encoding, "utf-8"))

    def query(self, sql: str) -> ResultSet:
        """
        Execute a fully composed statement.

        Raises:
            psycopg2.Error: Propagated unchanged after a rollback.
        """
        cur = self.conn.cursor(cursor_factory=extras.RealDictCursor)
        try:
            cur.execute(sql)
        except psycopg2.Error as e:
            cur.close()
            self.conn.rollback()
            logger.error(f"Query failed: {e}")
            raise
        return ResultSet(cur)
