"""
models/paging.py
----------------
Value objects describing how a result list should be paged and sorted.
Repositories translate them into LIMIT/OFFSET and ORDER BY clauses.
"""

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class PageRequest:
    """
    Zero-based page number plus page size.

    Attributes:
        page: Page index, starting at 0.
        size: Maximum number of rows per page.

    Raises:
        ValueError: If ``page`` is negative or ``size`` is below 1.
    """
    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"Page index must not be negative, got {self.page}")
        if self.size < 1:
            raise ValueError(f"Page size must be at least 1, got {self.size}")

    @classmethod
    def of(cls, page: int, size: int) -> "PageRequest":
        return cls(page, size)

    @property
    def offset(self) -> int:
        """Number of rows skipped before this page."""
        return self.page * self.size

    def next(self) -> "PageRequest":
        return PageRequest(self.page + 1, self.size)

    def previous_or_first(self) -> "PageRequest":
        return PageRequest(max(self.page - 1, 0), self.size)


@dataclass(frozen=True)
class SortOrder:
    """A single sort key: an entity attribute name and a direction."""
    property: str
    direction: Direction = Direction.ASC

    @classmethod
    def asc(cls, prop: str) -> "SortOrder":
        return cls(prop, Direction.ASC)

    @classmethod
    def desc(cls, prop: str) -> "SortOrder":
        return cls(prop, Direction.DESC)


@dataclass(frozen=True)
class Sort:
    """
    Ordered list of sort keys, applied left to right.

    Example:
        # order_id DESC, then order_date ASC
        Sort.by("order_id").descending().and_(Sort.by("order_date"))
    """
    orders: tuple[SortOrder, ...] = ()

    @classmethod
    def by(cls, *items) -> "Sort":
        """Build a Sort from attribute names (ascending) or SortOrder objects."""
        orders = tuple(
            item if isinstance(item, SortOrder) else SortOrder(item)
            for item in items
        )
        return cls(orders)

    def ascending(self) -> "Sort":
        return Sort(tuple(SortOrder(o.property, Direction.ASC) for o in self.orders))

    def descending(self) -> "Sort":
        return Sort(tuple(SortOrder(o.property, Direction.DESC) for o in self.orders))

    def and_(self, other: "Sort") -> "Sort":
        return Sort(self.orders + other.orders)

    def is_unsorted(self) -> bool:
        return not self.orders
