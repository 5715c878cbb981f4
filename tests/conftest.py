"""Pytest configuration and fixtures."""

import sqlite3

import pytest

SCHEMA = """
CREATE TABLE users (
    id          INTEGER PRIMARY KEY,
    username    TEXT,
    email       TEXT,
    status      TEXT,
    created_at  TEXT
);

CREATE TABLE expenses (
    id          INTEGER PRIMARY KEY,
    user_id     INTEGER NOT NULL,
    type        TEXT NOT NULL,
    amount      REAL NOT NULL,
    currency    TEXT DEFAULT 'EUR',
    category    TEXT,
    description TEXT,
    date        TEXT NOT NULL,
    raw_text    TEXT,
    created_at  TEXT
);
"""


def _dict_row(cursor, row):
    return {col[0]: row[i] for i, col in enumerate(cursor.description)}


class SQLiteResult:
    def __init__(self, cursor):
        self._cursor = cursor

    def fetch_all(self):
        return self._cursor.fetchall()


class SQLiteDatabase:
    """In-memory stand-in for db.database.Database.

    Values are quoted with SQLite's own quote() function and every executed
    statement is recorded in `executed`.
    """

    def __init__(self):
        self.conn = sqlite3.connect(":memory:")
        self.conn.row_factory = _dict_row
        self.conn.executescript(SCHEMA)
        self.executed = []

    def quote(self, value):
        return self.conn.execute("SELECT quote(?) AS q", (value,)).fetchone()["q"]

    def query(self, sql):
        self.executed.append(sql)
        return SQLiteResult(self.conn.execute(sql))

    def insert(self, table, rows):
        for row in rows:
            cols = ", ".join(row)
            marks = ", ".join("?" for _ in row)
            self.conn.execute(f"INSERT INTO {table} ({cols}) VALUES ({marks})", tuple(row.values()))
        self.conn.commit()


@pytest.fixture
def db():
    """Empty in-memory database with the users and expenses tables."""
    database = SQLiteDatabase()
    yield database
    database.conn.close()


@pytest.fixture
def users_db(db):
    """Three users: 1 and 3 active, 2 inactive."""
    db.insert("users", [
        {"id": 1, "username": "alice", "email": "alice@example.com", "status": "active"},
        {"id": 2, "username": "bob", "email": "bob@example.com", "status": "inactive"},
        {"id": 3, "username": "carol", "email": "carol@example.com", "status": "active"},
    ])
    return db


@pytest.fixture
def numbered_db(db):
    """Twelve active users with ids 1..12."""
    db.insert("users", [
        {"id": i, "username": f"user{i:02d}", "email": f"user{i}@example.com", "status": "active"}
        for i in range(1, 13)
    ])
    return db


@pytest.fixture
def expenses_db(db):
    """A handful of transactions for users 7 and 8."""
    db.insert("expenses", [
        {"id": 1, "user_id": 7, "type": "expense", "amount": 12.5, "category": "food", "date": "2024-03-01"},
        {"id": 2, "user_id": 7, "type": "income", "amount": 1500.0, "category": "salary", "date": "2024-03-02"},
        {"id": 3, "user_id": 7, "type": "expense", "amount": 40.0, "category": "transport", "date": "2024-03-05"},
        {"id": 4, "user_id": 8, "type": "expense", "amount": 9.99, "category": "food", "date": "2024-03-03"},
        {"id": 5, "user_id": 7, "type": "expense", "amount": 7.25, "category": "food", "date": "2024-03-05"},
    ])
    return db


@pytest.fixture
def model_registry(monkeypatch):
    """Isolated copy of the record type registry for models defined inside a test."""
    from models import base

    registry = dict(base._MODELS)
    monkeypatch.setattr(base, "_MODELS", registry)
    return registry
