"""
models/order.py
---------------
Domain model for customer orders.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class Order:
    """
    Represents a single order placed by a customer.

    Attributes:
        order_id: Database primary key.
        customer_id: Owning customer (foreign key to customers).
        order_date: Calendar date the order was placed.
    """
    order_id: int
    customer_id: int
    order_date: date

    def __str__(self) -> str:
        return f"Order #{self.order_id} | customer {self.customer_id} | {self.order_date}"
