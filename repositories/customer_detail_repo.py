"""
repositories/customer_detail_repo.py
------------------------------------
Data access layer for the `customer_details` table (1:1 with customers).
"""

from typing import Optional

from db.connection import connection_scope
from db.errors import StoreError
from models.customer_detail import CustomerDetail
from utils.logger import get_logger

logger = get_logger(__name__)


def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """Return the trimmed phone, or None when it is missing or blank."""
    if phone is None or not phone.strip():
        return None
    return phone.strip()


class CustomerDetailRepository:
    """Repository for CRUD operations on the customer_details table."""

    INSERT_SQL = """
        INSERT INTO customer_details (id, address, phone, notes)
        VALUES (%s, %s, %s, %s);
    """
    SELECT_BY_ID_SQL = "SELECT id, address, phone, notes FROM customer_details WHERE id = %s;"
    SELECT_ALL_SQL = "SELECT id, address, phone, notes FROM customer_details ORDER BY id;"
    UPDATE_SQL = """
        UPDATE customer_details
        SET address = %s, phone = %s, notes = %s
        WHERE id = %s;
    """
    DELETE_SQL = "DELETE FROM customer_details WHERE id = %s;"

    # ── CREATE ────────────────────────────────────────────

    def insert(self, detail: CustomerDetail, uow=None) -> CustomerDetail:
        """
        Insert the detail record of an existing customer.

        A blank phone is stored as NULL, never as an empty string.

        Args:
            detail: The CustomerDetail to persist; `id` must match a customer.
            uow: Optional open UnitOfWork to join.

        Raises:
            StoreError: If the customer does not exist, the detail already
                exists, or the store is unreachable.
        """
        params = (detail.id, detail.address, normalize_phone(detail.phone), detail.notes)
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.INSERT_SQL, params)
        except StoreError as e:
            logger.error(f"Failed to insert detail for customer #{detail.id}: {e}")
            raise
        logger.info(f"Inserted detail for customer #{detail.id}")
        return detail

    # ── READ ──────────────────────────────────────────────

    def find_by_id(self, detail_id: int) -> Optional[CustomerDetail]:
        """Fetch a detail by id; None if absent."""
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_BY_ID_SQL, (detail_id,))
            row = cur.fetchone()
        return self._row_to_detail(row) if row else None

    def find_all(self) -> list[CustomerDetail]:
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(self.SELECT_ALL_SQL)
            return [self._row_to_detail(r) for r in cur.fetchall()]

    # ── UPDATE ────────────────────────────────────────────

    def update(self, detail: CustomerDetail, uow=None) -> int:
        """
        Overwrite address, phone and notes of an existing detail.

        Returns:
            Rows affected. 0 means the id does not exist; this is a
            normal result, not an error.
        """
        params = (detail.address, normalize_phone(detail.phone), detail.notes, detail.id)
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.UPDATE_SQL, params)
                affected = cur.rowcount
        except StoreError as e:
            logger.error(f"Failed to update detail #{detail.id}: {e}")
            raise
        if not affected:
            logger.info(f"No detail #{detail.id} to update")
        return affected

    # ── DELETE ────────────────────────────────────────────

    def delete_by_id(self, detail_id: int, uow=None) -> int:
        """Delete a detail by id. Returns rows affected (0 if none)."""
        try:
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute(self.DELETE_SQL, (detail_id,))
                affected = cur.rowcount
        except StoreError as e:
            logger.error(f"Failed to delete detail #{detail_id}: {e}")
            raise
        if affected:
            logger.info(f"Deleted detail #{detail_id}")
        return affected

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_detail(row: tuple) -> CustomerDetail:
        """Convert a database row tuple to a CustomerDetail domain object."""
        return CustomerDetail(id=row[0], address=row[1], phone=row[2], notes=row[3])
