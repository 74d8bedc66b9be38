"""
repositories/customer_repo.py
-----------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here.
"""

from typing import Optional

from db.connection import connection_scope
from db.errors import StoreError
from models.customer import Customer
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerRepository:
    """Repository for CRUD operations and pattern search on the customers table."""

    INSERT_SQL = """
        INSERT INTO customers (id, name, email)
        VALUES (COALESCE(%s, nextval(pg_get_serial_sequence('customers', 'id'))), %s, %s)
        RETURNING id;
    """
    SYNC_SEQUENCE_SQL = """
        SELECT setval(pg_get_serial_sequence('customers', 'id'),
                      GREATEST((SELECT MAX(id) FROM customers), 1));
    """
    SELECT_BY_ID_SQL = "SELECT id, name, email FROM customers WHERE id = %s;"
    SELECT_ALL_SQL = "SELECT id, name, email FROM customers ORDER BY id;"
    SEARCH_SQL = """
        SELECT id, name, email
        FROM customers
        WHERE CAST(id AS TEXT) ILIKE %s
           OR name ILIKE %s
           OR email ILIKE %s
        ORDER BY id;
    """
    UPDATE_SQL = "UPDATE customers SET name = %s, email = %s WHERE id = %s;"
    DELETE_SQL = "DELETE FROM customers WHERE id = %s;"

    # ── CREATE ────────────────────────────────────────────

    def insert(self, customer: Customer, uow=None) -> Customer:
        """
        Insert a new customer.

        When `customer.id` is None the store assigns one. Either way the
        id the row was stored under is written back onto `customer`.
        After an explicit id the id sequence is moved past it, so later
        generated ids do not collide with it.

        Args:
            customer: The Customer to persist.
            uow: Optional open UnitOfWork; when given the write joins it
                and is committed (or rolled back) by its owner.

        Returns:
            The same Customer with its `id` populated.

        Raises:
            StoreError: On constraint violation (e.g. duplicate id) or
                connectivity failure.
        """
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                explicit_id = customer.id is not None
                cur.execute(self.INSERT_SQL, (customer.id, customer.name, customer.email))
                customer.id = cur.fetchone()[0]
                if explicit_id:
                    cur.execute(self.SYNC_SEQUENCE_SQL)
        except StoreError as e:
            logger.error(f"Failed to insert customer #{customer.id}: {e}")
            raise
        logger.info(f"Inserted customer #{customer.id}")
        return customer

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Fetch a single customer by primary key.

        Returns:
            A Customer, or None if no row has that id.
        """
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_BY_ID_SQL, (customer_id,))
            row = cur.fetchone()
        return self._row_to_customer(row) if row else None

    def find_all(self) -> list[Customer]:
        """Return every customer ordered by id ascending."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_ALL_SQL)
            return [self._row_to_customer(r) for r in cur.fetchall()]

    def search(self, pattern: str) -> list[Customer]:
        """
        Case-insensitive substring search over id (as text), name and email.

        The pattern is matched literally as ``%pattern%``, so an empty
        pattern matches every row. Deciding that blank input means
        "no filter" is left to the caller.

        Args:
            pattern: Text to look for.

        Returns:
            Matching customers ordered by id ascending.
        """
        like = f"%{pattern}%"
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SEARCH_SQL, (like, like, like))
            return [self._row_to_customer(r) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, customer: Customer, uow=None) -> int:
        """
        Overwrite name and email of an existing customer.

        Returns:
            Number of rows affected; 0 means no customer has that id.
        """
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.UPDATE_SQL, (customer.name, customer.email, customer.id))
                affected = cur.rowcount
        except StoreError as e:
            logger.error(f"Failed to update customer #{customer.id}: {e}")
            raise
        return affected

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, customer_id: int, uow=None) -> int:
        """
        Delete a customer; its detail row is removed by ON DELETE CASCADE.

        Returns:
            Number of rows affected; 0 means nothing was deleted.

        Raises:
            IntegrityViolationError: If orders still reference the customer.
        """
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.DELETE_SQL, (customer_id,))
                affected = cur.rowcount
        except StoreError as e:
            logger.error(f"Failed to delete customer #{customer_id}: {e}")
            raise
        if affected:
            logger.info(f"Deleted customer #{customer_id}")
        return affected

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_customer(row: tuple) -> Customer:
        """Convert a database row tuple to a Customer domain object."""
        return Customer(id=row[0], name=row[1], email=row[2])
