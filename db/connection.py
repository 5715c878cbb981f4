"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

Callers should pass a `Database` explicitly (see `pooled_database`).
`fetch_db` hands out the process-wide default handle for entry points that
have none; it lives from the first call until `close_pool`.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.database import Database
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None
_default_db: Database | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


@contextmanager
def pooled_database() -> Iterator[Database]:
    """Check out a connection for the duration of a block, wrapped as a Database."""
    conn = get_connection()
    try:
        yield Database(conn)
    finally:
        release_connection(conn)


def fetch_db() -> Database:
    """
    Return the process-wide default Database, checking out its connection lazily.

    The connection runs in autocommit mode: it is held until `close_pool`,
    so a SELECT must not leave it idle inside an open transaction.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    global _default_db
    if _default_db is None:
        conn = get_connection()
        conn.autocommit = True
        _default_db = Database(conn)
        logger.info("Default database handle acquired.")
    return _default_db


def close_pool() -> None:
    """Release the default handle and close all connections in the pool."""
    global _pool, _default_db
    if _default_db is not None:
        _default_db.conn.autocommit = False
        release_connection(_default_db.conn)
        _default_db = None
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")
