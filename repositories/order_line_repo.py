"""
repositories/order_line_repo.py
-------------------------------
Data access layer for order lines, the N:M junction between
orders and products.
"""

from decimal import Decimal

from db.connection import connection_scope
from db.errors import StoreError
from models.order_line import OrderLine
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderLineRepository:
    """Repository for the order_lines table. Lines have no single-row lookup."""

    INSERT_SQL = """
        INSERT INTO order_lines (order_id, product_id, quantity, unit_price)
        VALUES (%s, %s, %s, %s);
    """
    SELECT_ALL_SQL = """
        SELECT order_id, product_id, quantity, unit_price
        FROM order_lines
        ORDER BY order_id, product_id;
    """
    SELECT_BY_ORDER_SQL = """
        SELECT order_id, product_id, quantity, unit_price
        FROM order_lines
        WHERE order_id = %s
        ORDER BY product_id;
    """

    def insert(self, line: OrderLine, uow=None) -> OrderLine:
        """
        Insert one order line.

        Raises:
            StoreError: If the order or product does not exist, the pair is
                already present, or the store is unreachable.
        """
        params = (line.order_id, line.product_id, line.quantity, line.unit_price)
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.INSERT_SQL, params)
        except StoreError as e:
            logger.error(f"Failed to insert line ({line.order_id}, {line.product_id}): {e}")
            raise
        return line

    def find_all(self) -> list[OrderLine]:
        """Return every line ordered by (order_id, product_id)."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_ALL_SQL)
            return [self._row_to_line(r) for r in cur.fetchall()]

    def find_by_order_id(self, order_id: int) -> list[OrderLine]:
        """
        Return the lines of one order ordered by product_id.

        Args:
            order_id: The order whose lines to fetch.

        Returns:
            A possibly empty list; never None.
        """
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_BY_ORDER_SQL, (order_id,))
            return [self._row_to_line(r) for r in cur.fetchall()]

    @staticmethod
    def _row_to_line(row: tuple) -> OrderLine:
        return OrderLine(
            order_id=row[0],
            product_id=row[1],
            quantity=row[2],
            unit_price=Decimal(str(row[3])),
        )
