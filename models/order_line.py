"""
models/order_line.py
--------------------
Domain model for the order/product junction.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class OrderLine:
    """
    One product within an order, identified by (order_id, product_id).

    `unit_price` is the price agreed when the order was placed and does
    not follow later changes to Product.price.
    """
    order_id: int
    product_id: int
    quantity: int
    unit_price: Decimal

    @property
    def subtotal(self) -> Decimal:
        """quantity * unit_price."""
        return self.unit_price * self.quantity
