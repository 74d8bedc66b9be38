"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection_scope
from db.errors import StoreError
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Customers: id may be supplied by the caller or assigned by the sequence
CREATE TABLE IF NOT EXISTS customers (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL CHECK (name <> ''),
    email           VARCHAR(150)
);

-- Customer details: 1:1 with customers, sharing the primary key
CREATE TABLE IF NOT EXISTS customer_details (
    id              INT PRIMARY KEY REFERENCES customers(id) ON DELETE CASCADE,
    address         VARCHAR(200),
    phone           VARCHAR(30),
    notes           TEXT,
    CHECK (phone IS NULL OR phone <> '')
);

-- Products
CREATE TABLE IF NOT EXISTS products (
    id              INT PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    price           NUMERIC(12,2) NOT NULL CHECK (price >= 0)
);

-- Orders: N:1 with customers
CREATE TABLE IF NOT EXISTS orders (
    id              INT PRIMARY KEY,
    customer_id     INT NOT NULL REFERENCES customers(id),
    date            DATE NOT NULL DEFAULT CURRENT_DATE
);

-- Order lines: N:M junction between orders and products
CREATE TABLE IF NOT EXISTS order_lines (
    order_id        INT NOT NULL REFERENCES orders(id) ON DELETE CASCADE,
    product_id      INT NOT NULL REFERENCES products(id),
    quantity        INT NOT NULL CHECK (quantity > 0),
    unit_price      NUMERIC(12,2) NOT NULL CHECK (unit_price >= 0),
    PRIMARY KEY (order_id, product_id)
);

CREATE INDEX IF NOT EXISTS idx_orders_customer ON orders(customer_id);
"""

DROP_SQL = """
DROP TABLE IF EXISTS order_lines, orders, products, customer_details, customers;
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    try:
        with connection_scope() as conn, conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        logger.info("Database schema initialized successfully.")
    except StoreError as e:
        logger.error(f"Failed to initialize schema: {e}")
        raise


def drop_tables() -> None:
    """Drop every table created by create_tables()."""
    with connection_scope() as conn, conn.cursor() as cur:
        cur.execute(DROP_SQL)
    logger.info("Database schema dropped.")


if __name__ == "__main__":
    from db.connection import init_pool
    init_pool()
    create_tables()
    print("Database schema created successfully.")
