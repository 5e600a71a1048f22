"""
repositories/order_repo.py
---------------------------
Data access layer for customer orders.
All SQL queries related to the `orders` table live here.

Every `*_in` query takes a set of customer IDs and binds it as a single
array parameter (`customer_id = ANY(%s)`). An empty set short-circuits to
an empty list without touching the database.
"""

from datetime import date
from typing import Optional, Union

from db.connection import get_connection, release_connection
from models.order import Order
from models.paging import PageRequest, Sort
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = "order_id, customer_id, order_date"

# Entity attribute -> column. Only these may appear in an ORDER BY.
_SORTABLE = {
    "order_id": "order_id",
    "customer_id": "customer_id",
    "order_date": "order_date",
}


class OrderRepository:
    """Read-only queries over the orders table."""

    # ── BASIC READS ───────────────────────────────────────

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Fetch a single order by its primary key.

        Returns:
            An Order object or None if not found.
        """
        sql = f"SELECT {_COLUMNS} FROM orders WHERE order_id = %s;"
        rows = self._fetch_all(sql, (order_id,))
        return rows[0] if rows else None

    def find_all(self) -> list[Order]:
        """Fetch every order, ordered by order ID."""
        sql = f"SELECT {_COLUMNS} FROM orders ORDER BY order_id;"
        return self._fetch_all(sql, ())

    def count(self) -> int:
        """Total number of orders."""
        return self._fetch_scalar("SELECT COUNT(*) FROM orders;", ())

    def exists_by_id(self, order_id: int) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM orders WHERE order_id = %s);"
        return bool(self._fetch_scalar(sql, (order_id,)))

    # ── FILTER BY CUSTOMER ────────────────────────────────

    def find_by_customer_id(self, customer_id: int) -> list[Order]:
        """
        Fetch all orders placed by one customer.

        Args:
            customer_id: The owning customer's ID.

        Returns:
            List of Order objects (empty if the customer has none).
        """
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = %s;"
        return self._fetch_all(sql, (customer_id,))

    def find_by_customer_id_in(self, customer_ids: set[int]) -> list[Order]:
        """
        Fetch all orders placed by any of the given customers.

        Args:
            customer_ids: Customer IDs to match.

        Returns:
            List of Order objects; empty when ``customer_ids`` is empty.
        """
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s);"
        return self._fetch_all(sql, (list(customer_ids),))

    def find_by_customer_id_not_in(self, customer_ids: set[int]) -> list[Order]:
        """
        Fetch orders that were not placed by any of the given customers.
        An empty set excludes nobody, so every order is returned.
        """
        if not customer_ids:
            return self.find_all()
        sql = f"SELECT {_COLUMNS} FROM orders WHERE NOT (customer_id = ANY(%s));"
        return self._fetch_all(sql, (list(customer_ids),))

    # ── FILTER BY CUSTOMER AND DATE ───────────────────────

    def find_by_customer_id_in_and_order_date_less_than(
        self, customer_ids: set[int], order_date: date
    ) -> list[Order]:
        """Orders of the given customers placed strictly before ``order_date``."""
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) AND order_date < %s;"
        return self._fetch_all(sql, (list(customer_ids), order_date))

    def find_by_customer_id_in_and_order_date_greater_than(
        self, customer_ids: set[int], order_date: date
    ) -> list[Order]:
        """Orders of the given customers placed strictly after ``order_date``."""
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) AND order_date > %s;"
        return self._fetch_all(sql, (list(customer_ids), order_date))

    def find_by_customer_id_in_and_order_date_less_than_equal(
        self, customer_ids: set[int], order_date: date
    ) -> list[Order]:
        """Orders of the given customers placed on or before ``order_date``."""
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) AND order_date <= %s;"
        return self._fetch_all(sql, (list(customer_ids), order_date))

    def find_by_customer_id_in_and_order_date_greater_than_equal(
        self, customer_ids: set[int], order_date: date
    ) -> list[Order]:
        """Orders of the given customers placed on or after ``order_date``."""
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) AND order_date >= %s;"
        return self._fetch_all(sql, (list(customer_ids), order_date))

    def find_by_customer_id_in_and_day(
        self, customer_ids: set[int], day_pattern: str
    ) -> list[Order]:
        """
        Match the order date, rendered as ``YYYY-MM-DD``, against a LIKE pattern.

        Args:
            customer_ids: Customer IDs to match.
            day_pattern: SQL LIKE pattern, e.g. ``'%-17'`` for the 17th of any month.

        Returns:
            List of matching Order objects.
        """
        if not customer_ids:
            return []
        sql = f"""
            SELECT {_COLUMNS} FROM orders
            WHERE customer_id = ANY(%s)
              AND TO_CHAR(order_date, 'YYYY-MM-DD') LIKE %s;
        """
        return self._fetch_all(sql, (list(customer_ids), day_pattern))

    # ── SORTED ────────────────────────────────────────────

    def find_by_customer_id_in_order_by_order_id_asc(self, customer_ids: set[int]) -> list[Order]:
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) ORDER BY order_id ASC;"
        return self._fetch_all(sql, (list(customer_ids),))

    def find_by_customer_id_in_order_by_order_id_desc(self, customer_ids: set[int]) -> list[Order]:
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) ORDER BY order_id DESC;"
        return self._fetch_all(sql, (list(customer_ids),))

    def find_by_customer_id_in_order_by_order_id_desc_order_date_asc(
        self, customer_ids: set[int]
    ) -> list[Order]:
        if not customer_ids:
            return []
        sql = f"""
            SELECT {_COLUMNS} FROM orders
            WHERE customer_id = ANY(%s)
            ORDER BY order_id DESC, order_date ASC;
        """
        return self._fetch_all(sql, (list(customer_ids),))

    def find_by_customer_id_in_sorted(self, customer_ids: set[int], sort: Sort) -> list[Order]:
        """
        Fetch orders of the given customers using an arbitrary Sort.

        Args:
            customer_ids: Customer IDs to match.
            sort: Sort keys, e.g. ``Sort.by("order_id").descending()``.

        Raises:
            ValueError: If the sort names an unknown attribute.
        """
        order_by = self._order_by_clause(sort)
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s){order_by};"
        return self._fetch_all(sql, (list(customer_ids),))

    # ── LIMITED / PAGED ───────────────────────────────────

    def find_top5_by_customer_id_in(self, customer_ids: set[int]) -> list[Order]:
        """First five orders of the given customers, in the store's default order."""
        if not customer_ids:
            return []
        sql = f"SELECT {_COLUMNS} FROM orders WHERE customer_id = ANY(%s) LIMIT 5;"
        return self._fetch_all(sql, (list(customer_ids),))

    def find_by_customer_id_in_offset_and_limit(
        self,
        customer_ids: set[int],
        page_or_offset: Union[PageRequest, int],
        size: Optional[int] = None,
    ) -> list[Order]:
        """
        Fetch one page of the given customers' orders, ordered by order ID.

        Two call styles:
            repo.find_by_customer_id_in_offset_and_limit({1, 2}, PageRequest.of(0, 5))
            repo.find_by_customer_id_in_offset_and_limit({1, 2}, 0, 5)

        Args:
            customer_ids: Customer IDs to match.
            page_or_offset: A PageRequest, or the number of rows to skip.
            size: Row count; required with a numeric offset, forbidden with a PageRequest.

        Raises:
            TypeError: If the arguments mix or omit the two call styles.
            ValueError: If the offset is negative or the size is below 1.
        """
        if isinstance(page_or_offset, PageRequest):
            if size is not None:
                raise TypeError("size must not be given together with a PageRequest")
            offset, limit = page_or_offset.offset, page_or_offset.size
        else:
            if isinstance(page_or_offset, bool) or not isinstance(page_or_offset, int):
                raise TypeError(
                    f"Expected a PageRequest or an int offset, got {type(page_or_offset).__name__}"
                )
            if size is None:
                raise TypeError("size is required when an explicit offset is given")
            if page_or_offset < 0:
                raise ValueError(f"Offset must not be negative, got {page_or_offset}")
            if size < 1:
                raise ValueError(f"Size must be at least 1, got {size}")
            offset, limit = page_or_offset, size

        if not customer_ids:
            return []
        sql = f"""
            SELECT {_COLUMNS} FROM orders
            WHERE customer_id = ANY(%s)
            ORDER BY order_id
            LIMIT %s OFFSET %s;
        """
        return self._fetch_all(sql, (list(customer_ids), limit, offset))

    # ── HELPERS ───────────────────────────────────────────

    def _fetch_all(self, sql: str, params: tuple) -> list[Order]:
        """Run a SELECT on a pooled connection and map every row to an Order."""
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(sql, params)
                orders = [self._row_to_order(r) for r in cur.fetchall()]
            logger.debug(f"Fetched {len(orders)} order(s)")
            return orders
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
    def _order_by_clause(sort: Sort) -> str:
        """Render a Sort as an ORDER BY clause using whitelisted columns only."""
        if sort.is_unsorted():
            return ""
        keys = []
        for order in sort.orders:
            column = _SORTABLE.get(order.property)
            if column is None:
                raise ValueError(f"Cannot sort orders by unknown attribute '{order.property}'")
            keys.append(f"{column} {order.direction.value}")
        return " ORDER BY " + ", ".join(keys)

    @staticmethod
    def _row_to_order(row: tuple) -> Order:
        """Convert a database row tuple to an Order domain object."""
        return Order(
            order_id=row[0],
            customer_id=row[1],
            order_date=row[2],
        )
