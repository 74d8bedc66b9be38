"""
models/order.py
---------------
Domain model for orders.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass
class Order:
    """
    An order placed by a customer.

    Attributes:
        id: Primary key, chosen by the caller.
        customer_id: Foreign key to Customer.id.
        date: Day the order was placed.
    """
    id: int
    customer_id: int
    date: date = field(default_factory=date.today)
