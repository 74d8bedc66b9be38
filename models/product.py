"""
models/product.py
-----------------
Domain model for products.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """A sellable product with its current list price; `id` is chosen by the caller."""
    id: int
    name: str
    price: Decimal

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.price:.2f})"
