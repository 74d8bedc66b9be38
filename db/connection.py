"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

Every repository operation goes through `connection_scope()`, which either
borrows the connection of a caller's UnitOfWork or acquires one for the
duration of that single operation.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from db.errors import StoreUnavailableError, translate
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: Optional[str] = None) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.
        dsn: Connection string; defaults to DATABASE_URL from config.

    Raises:
        StoreUnavailableError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn or DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise translate(e) from e


def get_connection():
    """
    Get a connection from the pool.

    Returns:
        A psycopg2 connection object.

    Raises:
        StoreUnavailableError: If the pool has not been initialized or is exhausted.
    """
    if _pool is None:
        raise StoreUnavailableError("Database pool not initialized. Call init_pool() first.")
    try:
        return _pool.getconn()
    except psycopg2.Error as e:
        logger.error(f"Failed to acquire a database connection: {e}")
        raise translate(e) from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


def rollback_if_open(conn) -> None:
    """Roll back `conn` unless it is already closed."""
    if not conn.closed:
        conn.rollback()


@contextmanager
def connection_scope(uow=None) -> Iterator:
    """
    Yield the connection a single repository operation should run on.

    Without `uow` a pooled connection is acquired, committed when the block
    finishes, rolled back when it raises and released on every path.
    With `uow` the unit of work's connection is yielded as-is: it is never
    committed, rolled back or released here.

    Args:
        uow: Optional open UnitOfWork the operation participates in.

    Raises:
        RuntimeError: If `uow` has not been entered or has already exited.
        StoreError: Any psycopg2 failure inside the block, translated.
    """
    if uow is not None:
        if uow.connection is None:
            raise RuntimeError("UnitOfWork is not active.")
        try:
            yield uow.connection
        except psycopg2.Error as e:
            raise translate(e) from e
        return

    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except psycopg2.Error as e:
        rollback_if_open(conn)
        raise translate(e) from e
    except Exception:
        rollback_if_open(conn)
        raise
    finally:
        release_connection(conn)
