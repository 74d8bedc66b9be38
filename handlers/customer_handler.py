"""
handlers/customer_handler.py
----------------------------
Command handlers for listing, searching, creating, showing and deleting
customers. Each handler delegates to CustomerService and prints the result.
"""

import argparse

from db.errors import StoreError
from models.customer import Customer
from models.customer_detail import CustomerDetail
from services.customer_service import CustomerService
from services.errors import CustomerExistsError, ValidationError

_HEADER = f"{'ID':>6}  {'NAME':<30}  EMAIL"


def _print_table(customers: list[Customer]) -> None:
    if not customers:
        print("No customers found.")
        return
    print(_HEADER)
    for c in customers:
        print(f"{c.id:>6}  {c.name:<30}  {c.email or ''}")


def list_command(args: argparse.Namespace, service: CustomerService) -> int:
    """list [text] - list every customer, or those matching `text`."""
    try:
        _print_table(service.list_customers(getattr(args, "text", None)))
    except StoreError as e:
        print(f"Error loading customers: {e}")
        return 1
    return 0


def add_command(args: argparse.Namespace, service: CustomerService) -> int:
    """add - create a customer, with a detail record when any detail field is given."""
    customer = Customer(id=args.id, name=args.name, email=args.email)
    detail = None
    if args.address or args.phone or args.notes:
        detail = CustomerDetail(address=args.address, phone=args.phone, notes=args.notes)
    try:
        saved = service.create(customer, detail)
    except (ValidationError, CustomerExistsError) as e:
        print(f"⚠️ {e}")
        return 2
    except StoreError as e:
        print(f"Error saving customer: {e}")
        return 1
    print(f"✅ Customer saved: {saved}")
    return 0


def show_command(args: argparse.Namespace, service: CustomerService) -> int:
    """show <id> - print a customer together with its detail record."""
    try:
        profile = service.get_profile(args.id)
    except StoreError as e:
        print(f"Error loading customer: {e}")
        return 1
    if profile is None:
        print(f"⚠️ Customer #{args.id} not found.")
        return 2

    customer, detail = profile
    print(customer)
    if detail is not None:
        print(f"  Address: {detail.address or '-'}")
        print(f"  Phone:   {detail.phone or '-'}")
        print(f"  Notes:   {detail.notes or '-'}")
    return 0


def delete_command(args: argparse.Namespace, service: CustomerService) -> int:
    """delete <id> - delete a customer and its detail record."""
    try:
        deleted = service.remove(args.id)
    except StoreError as e:
        print(f"Error deleting customer: {e}")
        return 1
    if not deleted:
        print(f"⚠️ Customer #{args.id} not found.")
        return 2
    print(f"🗑️ Customer #{args.id} deleted.")
    return 0
