"""
db/unit_of_work.py
------------------
Groups several repository writes into one atomic transaction.

Usage:
    with UnitOfWork() as uow:
        customers.insert(customer, uow)
        details.insert(detail, uow)

Either every write inside the block commits, or none does.
"""

import psycopg2

from db.connection import get_connection, release_connection, rollback_if_open
from db.errors import translate
from utils.logger import get_logger

logger = get_logger(__name__)


class UnitOfWork:
    """
    Caller-scoped transaction handle.

    Owns exactly one pooled connection between __enter__ and __exit__.
    Repositories only borrow `connection`; beginning and ending the
    transaction is done here and nowhere else.
    """

    def __init__(self):
        self.connection = None

    def __enter__(self) -> "UnitOfWork":
        if self.connection is not None:
            raise RuntimeError("UnitOfWork is already active.")
        self.connection = get_connection()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        conn = self.connection
        try:
            if exc_type is None:
                self._commit(conn)
            else:
                rollback_if_open(conn)
                logger.info(f"Unit of work rolled back after {exc_type.__name__}")
        finally:
            release_connection(conn)
            self.connection = None
        return False

    @staticmethod
    def _commit(conn) -> None:
        try:
            conn.commit()
        except psycopg2.Error as e:
            rollback_if_open(conn)
            logger.error(f"Failed to commit unit of work: {e}")
            raise translate(e) from e
