"""
repositories/product_repo.py
----------------------------
Data access layer for products.
"""

from decimal import Decimal
from typing import Optional

from db.connection import connection_scope
from db.errors import StoreError
from models.product import Product
from utils.logger import get_logger

logger = get_logger(__name__)


class ProductRepository:
    """Repository for insert and lookups on the products table."""

    INSERT_SQL = "INSERT INTO products (id, name, price) VALUES (%s, %s, %s);"
    SELECT_BY_ID_SQL = "SELECT id, name, price FROM products WHERE id = %s;"
    SELECT_ALL_SQL = "SELECT id, name, price FROM products ORDER BY id;"

    def insert(self, product: Product, uow=None) -> Product:
        """
        Insert a new product.

        Raises:
            StoreError: On duplicate id, negative price or connectivity failure.
        """
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.INSERT_SQL, (product.id, product.name, product.price))
        except StoreError as e:
            logger.error(f"Failed to insert product #{product.id}: {e}")
            raise
        logger.info(f"Inserted product #{product.id}")
        return product

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Fetch a product by id; None if absent."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_BY_ID_SQL, (product_id,))
            row = cur.fetchone()
        return self._row_to_product(row) if row else None

    def find_all(self) -> list[Product]:
        """Return every product ordered by id ascending."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_ALL_SQL)
            return [self._row_to_product(r) for r in cur.fetchall()]

    @staticmethod
    def _row_to_product(row: tuple) -> Product:
        return Product(id=row[0], name=row[1], price=Decimal(str(row[2])))
