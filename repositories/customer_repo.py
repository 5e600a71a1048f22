"""
repositories/customer_repo.py
------------------------------
Data access layer for customer records.
Queries here read `customers`, joining `orders` where a lookup starts
from order data.
"""

from typing import Optional

from db.connection import get_connection, release_connection
from models.customer import Customer
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "c.customer_id, c.name, c.email"


class CustomerRepository:
    """Read-only queries over the customers table."""

    # ── BASIC READS ───────────────────────────────────────

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Fetch a customer by primary key.

        Returns:
            A Customer object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM customers c WHERE c.customer_id = %s;"
        rows = self._fetch_all(sql, (customer_id,))
        return rows[0] if rows else None

    def find_all(self) -> list[Customer]:
        sql = f"SELECT {_COLUMNS} FROM customers c ORDER BY c.customer_id;"
        return self._fetch_all(sql, ())

    def count(self) -> int:
        return self._fetch_scalar("SELECT COUNT(*) FROM customers;", ())

    def exists_by_id(self, customer_id: int) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM customers WHERE customer_id = %s);"
        return bool(self._fetch_scalar(sql, (customer_id,)))

    # ── LOOKUPS THROUGH ORDERS ────────────────────────────

    def find_customers_by_order_id_in(self, order_ids: set[int]) -> list[Customer]:
        """
        Fetch the customers who placed any of the given orders.

        Customers with no matching order are never returned, and a customer
        owning several of the orders appears once.

        Args:
            order_ids: Order IDs to look up.

        Returns:
            List of Customer objects ordered by customer ID; empty when
            ``order_ids`` is empty.
        """
        if not order_ids:
            return []
        sql = f"""
            SELECT DISTINCT {_COLUMNS}
            FROM orders o
            JOIN customers c ON c.customer_id = o.customer_id
            WHERE o.order_id = ANY(%s)
            ORDER BY c.customer_id;
        """
        return self._fetch_all(sql, (list(order_ids),))

    def find_customer_who_ordered_last(self) -> Optional[Customer]:
        """
        Fetch the customer behind the most recent order.

        When several orders share the latest date, the one with the highest
        order ID wins.

        Returns:
            A Customer object, or None if there are no orders.
        """
        sql = f"""
            SELECT {_COLUMNS} FROM customers c
            WHERE c.customer_id = (
                SELECT o.customer_id FROM orders o
                ORDER BY o.order_date DESC, o.order_id DESC
                LIMIT 1
            );
        """
        rows = self._fetch_all(sql, ())
        if not rows:
            logger.info("No orders found; nobody has ordered yet.")
            return None
        return rows[0]

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_all(self, sql: str, params: tuple) -> list[Customer]:
        """Run a SELECT on a pooled connection and map every row to a Customer."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                customers = [self._row_to_customer(r) for r in cur.fetchall()]
            logger.debug(f"Fetched {len(customers)} customer(s)")
            return customers
        finally:
            release_connection(conn)

    @staticmethod
    def _fetch_scalar(sql: str, params: tuple):
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchone()[0]
        finally:
            release_connection(conn)

    @staticmethod
    def _row_to_customer(row: tuple) -> Customer:
        """Convert a database row tuple to a Customer domain object."""
        return Customer(
            customer_id=row[0],
            name=row[1],
            email=row[2],
        )
