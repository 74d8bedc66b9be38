"""
services/errors.py
------------------
Exceptions raised by the service layer before the database is touched.
"""


class ValidationError(Exception):
    """Raised when input is malformed (blank name, negative price, ...)."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


class CustomerExistsError(Exception):
    """Raised when creating a customer whose id is already taken."""

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer #{customer_id} already exists.")
