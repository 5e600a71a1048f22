"""
main.py
-------
Command-line entry point for the shop data-access layer.

Responsibilities:
    - Initialize the database connection pool.
    - Create the schema on demand.
    - Run a few read-only reports through the repositories.

Usage:
    python main.py init-db
    python main.py last-customer
    python main.py orders 1 2 [--page 0 --size 10]
"""

import argparse
from typing import Optional

from db.connection import init_pool, close_pool
from db.init_db import create_tables
from models.paging import PageRequest
from repositories.customer_repo import CustomerRepository
from repositories.order_repo import OrderRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Customer/order reports.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="Create the customers and orders tables")
    sub.add_parser("last-customer", help="Show the customer who ordered last")

    orders = sub.add_parser("orders", help="List orders for the given customer IDs")
    orders.add_argument("customer_ids", nargs="+", type=int)
    orders.add_argument("--page", type=int, default=None)
    orders.add_argument("--size", type=int, default=10)
    return parser


def run(args: argparse.Namespace) -> list[str]:
    """Execute one command and return the lines to print."""
    if args.command == "init-db":
        create_tables()
        return ["Database schema created successfully."]

    if args.command == "last-customer":
        customer = CustomerRepository().find_customer_who_ordered_last()
        return [str(customer) if customer else "No orders yet."]

    # ── orders ────────────────────────────────────────────
    repo = OrderRepository()
    ids = set(args.customer_ids)
    if args.page is None:
        found = repo.find_by_customer_id_in_order_by_order_id_asc(ids)
    else:
        found = repo.find_by_customer_id_in_offset_and_limit(ids, PageRequest.of(args.page, args.size))
    return [str(o) for o in found] or ["No orders found."]


def main(argv: Optional[list[str]] = None) -> None:
    """Parse arguments, run the command and release the pool."""
    args = build_parser().parse_args(argv)

    logger.info("Initializing database...")
    init_pool()
    try:
        for line in run(args):
            print(line)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
