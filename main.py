"""
main.py
-------
Entry point for the customer management command line.

Responsibilities:
    - Initialize the database connection pool (and, on request, the schema).
    - Parse the command line and dispatch to the matching handler.
    - Close the pool on exit.
"""

import argparse
import sys
from typing import Optional

from db.connection import close_pool, init_pool
from db.errors import StoreError
from db.init_db import create_tables
from handlers.customer_handler import add_command, delete_command, list_command, show_command
from handlers.order_handler import order_command, products_command
from services.customer_service import CustomerService
from services.order_service import OrderService
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per handler."""
    parser = argparse.ArgumentParser(prog="customers-cli", description="Manage customers and orders.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the database tables")

    p = sub.add_parser("list", help="List customers")
    p.set_defaults(text=None)

    p = sub.add_parser("search", help="Search customers by id, name or email")
    p.add_argument("text")

    p = sub.add_parser("add", help="Create a customer")
    p.add_argument("--id", type=int)
    p.add_argument("--name", required=True)
    p.add_argument("--email")
    p.add_argument("--address")
    p.add_argument("--phone")
    p.add_argument("--notes")

    for name, help_text in (("show", "Show a customer with its details"),
                            ("delete", "Delete a customer")):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("id", type=int)

    sub.add_parser("products", help="List products")

    p = sub.add_parser("order", help="Show an order with its lines")
    p.add_argument("id", type=int)

    return parser


def dispatch(args: argparse.Namespace) -> int:
    """Run the handler for `args.command` and return its exit code."""
    if args.command == "init-db":
        create_tables()
        print("Database schema created successfully.")
        return 0

    customer_handlers = {
        "list": list_command,
        "search": list_command,
        "add": add_command,
        "show": show_command,
        "delete": delete_command,
    }
    if args.command in customer_handlers:
        return customer_handlers[args.command](args, CustomerService())

    order_handlers = {"products": products_command, "order": order_command}
    return order_handlers[args.command](args, OrderService())


def main(argv: Optional[list[str]] = None) -> int:
    """Initialize the pool, run one command and clean up."""
    args = build_parser().parse_args(argv)

    # ── 1. Database setup ─────────────────────────────────
    try:
        init_pool()
    except StoreError as e:
        print(f"Cannot connect to the database: {e}")
        return 1

    # ── 2. Run the command ────────────────────────────────
    try:
        return dispatch(args)
    except StoreError as e:
        logger.error(f"Command '{args.command}' failed: {e}")
        print(f"Error: {e}")
        return 1
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        close_pool()


if __name__ == "__main__":
    sys.exit(main())
