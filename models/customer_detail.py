"""
models/customer_detail.py
-------------------------
Domain model for the 1:1 detail record attached to a customer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CustomerDetail:
    """
    Extra data for a customer, sharing the customer's primary key.

    Attributes:
        id: Same value as the owning Customer.id.
        address: Postal address.
        phone: Phone number; None when unknown.
        notes: Free-form notes.
    """
    id: Optional[int] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    notes: Optional[str] = None
