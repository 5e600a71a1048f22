"""
models/customer.py
------------------
Domain model for customers.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    """
    Represents a customer row.

    Attributes:
        customer_id: Database primary key, immutable once assigned.
        name: Display name.
        email: Optional contact address.
    """
    customer_id: int
    name: str
    email: Optional[str] = None

    def __str__(self) -> str:
        contact = f" <{self.email}>" if self.email else ""
        return f"#{self.customer_id} {self.name}{contact}"
