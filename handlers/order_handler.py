"""
handlers/order_handler.py
-------------------------
Command handlers for products and orders.
"""

import argparse

from db.errors import StoreError
from services.order_service import OrderService


def products_command(args: argparse.Namespace, service: OrderService) -> int:
    """products - list every product."""
    try:
        products = service.list_products()
    except StoreError as e:
        print(f"Error loading products: {e}")
        return 1
    if not products:
        print("No products found.")
    for p in products:
        print(p)
    return 0


def order_command(args: argparse.Namespace, service: OrderService) -> int:
    """order <id> - print an order with its lines and total."""
    try:
        found = service.get_order(args.id)
    except StoreError as e:
        print(f"Error loading order: {e}")
        return 1
    if found is None:
        print(f"⚠️ Order #{args.id} not found.")
        return 2

    order, lines = found
    print(f"Order #{order.id} | customer #{order.customer_id} | {order.date}")
    for line in lines:
        print(f"  product #{line.product_id}: {line.quantity} x {line.unit_price:.2f} = {line.subtotal:.2f}")
    total = OrderService.total_of(lines)
    print(f"  Total: {total:.2f}")
    return 0
