"""
db/errors.py
------------
Exceptions raised by the database layer.

Every failure talking to PostgreSQL surfaces as a StoreError so callers
never need to import psycopg2 themselves. The original driver exception
is kept as ``__cause__``.
"""

import psycopg2
from psycopg2 import pool


class StoreError(Exception):
    """Base exception for any failure communicating with the store."""

    pass


class IntegrityViolationError(StoreError):
    """Raised when a statement violates a constraint (duplicate id, FK, CHECK, NOT NULL)."""

    pass


class StoreUnavailableError(StoreError):
    """Raised when no connection can be obtained (store unreachable, pool missing or exhausted)."""

    pass


def translate(exc: Exception) -> StoreError:
    """
    Map a driver exception onto the StoreError taxonomy.

    Args:
        exc: The exception raised by psycopg2 or its pool.

    Returns:
        A StoreError subclass instance carrying the driver message.
    """
    if isinstance(exc, psycopg2.IntegrityError):
        return IntegrityViolationError(str(exc).strip())
    if isinstance(exc, (psycopg2.OperationalError, psycopg2.InterfaceError, pool.PoolError)):
        return StoreUnavailableError(str(exc).strip())
    return StoreError(str(exc).strip())
