"""
repositories/order_repo.py
--------------------------
Data access layer for orders (N:1 with customers).
"""

from datetime import date, datetime
from typing import Optional

from db.connection import connection_scope
from db.errors import StoreError
from models.order import Order
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderRepository:
    """Repository for insert and lookups on the orders table."""

    INSERT_SQL = "INSERT INTO orders (id, customer_id, date) VALUES (%s, %s, %s);"
    SELECT_BY_ID_SQL = "SELECT id, customer_id, date FROM orders WHERE id = %s;"
    SELECT_ALL_SQL = "SELECT id, customer_id, date FROM orders ORDER BY id;"

    def insert(self, order: Order, uow=None) -> Order:
        """
        Insert a new order.

        Args:
            order: The Order to persist; `customer_id` must exist.
            uow: Optional open UnitOfWork to join.

        Raises:
            StoreError: On duplicate id, unknown customer or connectivity failure.
        """
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.INSERT_SQL, (order.id, order.customer_id, order.date))
        except StoreError as e:
            logger.error(f"Failed to insert order #{order.id}: {e}")
            raise
        logger.info(f"Inserted order #{order.id} for customer #{order.customer_id}")
        return order

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Fetch an order by id; None if absent."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_BY_ID_SQL, (order_id,))
            row = cur.fetchone()
        return self._row_to_order(row) if row else None

    def find_all(self) -> list[Order]:
        """Return every order ordered by id ascending."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_ALL_SQL)
            return [self._row_to_order(r) for r in cur.fetchall()]

    @staticmethod
    def _row_to_order(row: tuple) -> Order:
        """Convert a database row tuple to an Order; the date column is always a `date`."""
        order_date = row[2]
        if isinstance(order_date, datetime):
            order_date = order_date.date()
        elif isinstance(order_date, str):
            order_date = date.fromisoformat(order_date)
        return Order(id=row[0], customer_id=row[1], date=order_date)
