"""
services/customer_service.py
----------------------------
Business logic for customers and their detail records.
Composes CustomerRepository and CustomerDetailRepository, and owns the
unit of work that makes "customer + detail" a single atomic write.
"""

from typing import Optional

from db.unit_of_work import UnitOfWork
from models.customer import Customer
from models.customer_detail import CustomerDetail
from repositories.customer_detail_repo import CustomerDetailRepository
from repositories.customer_repo import CustomerRepository
from services.errors import CustomerExistsError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerService:
    """
    Handles all business logic related to customers.

    Workflow for creating a customer:
        1. Validate the input.
        2. Make sure the id is not taken.
        3. Insert customer and detail inside one UnitOfWork.
    """

    def __init__(self, customers: Optional[CustomerRepository] = None,
                 details: Optional[CustomerDetailRepository] = None):
        self.customers = customers or CustomerRepository()
        self.details = details or CustomerDetailRepository()

    def list_customers(self, text: Optional[str] = None) -> list[Customer]:
        """
        List customers, filtered by free text when given.

        Blank or missing text means "no filter" and lists everybody.
        """
        query = (text or "").strip()
        if not query:
            return self.customers.find_all()
        return self.customers.search(query)

    def register(self, customer: Customer, detail: Optional[CustomerDetail] = None) -> Customer:
        """
        Insert a customer and, optionally, its detail atomically.

        The detail's id is aligned with the customer's id after the
        customer insert. If either write fails neither is kept.

        Raises:
            StoreError: Propagated unchanged from the repositories.
        """
        with UnitOfWork() as uow:
            self.customers.insert(customer, uow)
            if detail is not None:
                detail.id = customer.id
                self.details.insert(detail, uow)
        logger.info(f"Registered customer #{customer.id}{' with detail' if detail else ''}")
        return customer

    def create(self, customer: Customer, detail: Optional[CustomerDetail] = None) -> Customer:
        """
        Validate and register a new customer.

        Raises:
            ValidationError: If the name is blank or the id is not positive.
            CustomerExistsError: If a customer with that id already exists.
            StoreError: On any database failure.
        """
        self._validate(customer)
        if customer.id is not None and self.customers.find_by_id(customer.id) is not None:
            raise CustomerExistsError(customer.id)
        return self.register(customer, detail)

    def get_profile(self, customer_id: int) -> Optional[tuple[Customer, Optional[CustomerDetail]]]:
        """Return (customer, detail) for an id, or None when the customer does not exist."""
        customer = self.customers.find_by_id(customer_id)
        if customer is None:
            return None
        return customer, self.details.find_by_id(customer_id)

    def rename(self, customer: Customer) -> bool:
        """Update name and email. Returns False when the customer does not exist."""
        self._validate(customer)
        return self.customers.update(customer) > 0

    def remove(self, customer_id: int) -> bool:
        """Delete a customer (and, by cascade, its detail). Returns False if nothing was deleted."""
        return self.customers.delete_by_id(customer_id) > 0

    @staticmethod
    def _validate(customer: Customer) -> None:
        if not customer.name or not customer.name.strip():
            raise ValidationError("name", "must not be blank")
        if customer.id is not None and customer.id <= 0:
            raise ValidationError("id", "must be a positive integer")
        customer.name = customer.name.strip()
        if customer.email is not None:
            customer.email = customer.email.strip() or None
