"""Pytest fixtures for the data-access tests."""

import os
from collections import deque

import pytest

import db.connection


class FakeCursor:
    """Minimal stand-in for a psycopg2 cursor driven by a scripted response queue."""

    def __init__(self, conn):
        self.conn = conn
        self.rows = []
        self.rowcount = -1
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append((" ".join(sql.split()), params))
        response = self.conn.pool.responses.popleft() if self.conn.pool.responses else {}
        if isinstance(response, Exception):
            raise response
        self.rows = list(response.get("rows", []))
        self.rowcount = response.get("rowcount", len(self.rows))

    def fetchone(self):
        return self.rows.pop(0) if self.rows else None

    def fetchall(self):
        rows, self.rows = self.rows, []
        return rows


class FakeConnection:
    """Records statements, commits and rollbacks."""

    def __init__(self, pool):
        self.pool = pool
        self.executed = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0
        self.commit_error = None

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakePool:
    """Replaces SimpleConnectionPool; hands out a fresh FakeConnection per getconn()."""

    def __init__(self):
        self.responses = deque()
        self.connections = []
        self.released = []

    def respond(self, *responses):
        """Queue one response per upcoming execute(): a dict or an exception to raise."""
        self.responses.extend(responses)

    def getconn(self):
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn

    def putconn(self, conn):
        self.released.append(conn)

    def closeall(self):
        pass

    @property
    def executed(self):
        return [stmt for conn in self.connections for stmt in conn.executed]


@pytest.fixture
def fake_pool(monkeypatch):
    """Install a FakePool as the module-level connection pool."""
    pool = FakePool()
    monkeypatch.setattr(db.connection, "_pool", pool)
    yield pool


def integration_database_url():
    """Return TEST_DATABASE_URL, skipping (or failing under REQUIRE_TEST_DATABASE=1) when unset."""
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        if os.getenv("REQUIRE_TEST_DATABASE") == "1":
            pytest.fail("REQUIRE_TEST_DATABASE=1 but TEST_DATABASE_URL is not set")
        pytest.skip("TEST_DATABASE_URL not set")
    return url


@pytest.fixture
def pg_database():
    """
    Fresh schema on a real PostgreSQL database.

    Needs TEST_DATABASE_URL pointing at a database the tests may freely
    drop and recreate tables in. Without it the test is skipped, or fails
    when REQUIRE_TEST_DATABASE=1 is set.
    """
    url = integration_database_url()

    from db.init_db import create_tables, drop_tables

    db.connection.close_pool()
    db.connection.init_pool(1, 3, dsn=url)
    drop_tables()
    create_tables()
    yield
    drop_tables()
    db.connection.close_pool()
