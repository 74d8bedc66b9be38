"""
services/order_service.py
-------------------------
Business logic for orders: placing an order together with its lines
and reading an order back with its lines.
"""

from decimal import Decimal
from typing import Optional

from db.unit_of_work import UnitOfWork
from models.order import Order
from models.order_line import OrderLine
from models.product import Product
from repositories.order_line_repo import OrderLineRepository
from repositories.order_repo import OrderRepository
from repositories.product_repo import ProductRepository
from services.errors import ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)


class OrderService:
    """Orchestrates OrderRepository, OrderLineRepository and ProductRepository."""

    def __init__(self, orders: Optional[OrderRepository] = None,
                 lines: Optional[OrderLineRepository] = None,
                 products: Optional[ProductRepository] = None):
        self.orders = orders or OrderRepository()
        self.lines = lines or OrderLineRepository()
        self.products = products or ProductRepository()

    def add_product(self, product: Product) -> Product:
        """
        Validate and insert a product.

        Raises:
            ValidationError: If the name is blank or the price is negative.
        """
        if not product.name or not product.name.strip():
            raise ValidationError("name", "must not be blank")
        if product.price is None or Decimal(product.price) < 0:
            raise ValidationError("price", "must be zero or positive")
        return self.products.insert(product)

    def list_products(self) -> list[Product]:
        """Return every product ordered by id."""
        return self.products.find_all()

    def place_order(self, order: Order, lines: list[OrderLine]) -> Order:
        """
        Insert an order and all of its lines in a single transaction.

        Each line's `order_id` is set to the order's id.

        Raises:
            ValidationError: If a quantity is not positive or a unit price is negative.
            StoreError: If any insert fails; nothing is kept in that case.
        """
        for line in lines:
            if line.quantity <= 0:
                raise ValidationError("quantity", f"must be positive for product #{line.product_id}")
            if Decimal(line.unit_price) < 0:
                raise ValidationError("unit_price", f"must be zero or positive for product #{line.product_id}")

        with UnitOfWork() as uow:
            self.orders.insert(order, uow)
            for line in lines:
                line.order_id = order.id
                self.lines.insert(line, uow)
        logger.info(f"Placed order #{order.id} with {len(lines)} line(s)")
        return order

    def get_order(self, order_id: int) -> Optional[tuple[Order, list[OrderLine]]]:
        """Return (order, lines ordered by product_id), or None if the order does not exist."""
        order = self.orders.find_by_id(order_id)
        if order is None:
            return None
        return order, self.lines.find_by_order_id(order_id)

    def order_total(self, order_id: int) -> Decimal:
        """Total of the stored order's lines."""
        return self.total_of(self.lines.find_by_order_id(order_id))

    @staticmethod
    def total_of(lines: list[OrderLine]) -> Decimal:
        """Sum of quantity * unit_price over `lines` (0 when there are none)."""
        return sum((line.subtotal for line in lines), Decimal("0"))
