"""
models/customer.py
------------------
Domain model for customers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """
    Represents a row of the customers table.

    Attributes:
        name: Display name (must not be empty).
        email: Contact e-mail address.
        id: Primary key. None lets the store assign one on insert.
    """
    name: str
    email: Optional[str] = None
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email or '-'}>"
