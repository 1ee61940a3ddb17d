"""Derived statement types.

Nothing here is persisted.  Every instance is rebuilt from the order
set on each request, and balances are properties so they can never go
stale relative to the sums they are derived from.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from osr.domain.exceptions import InvalidInputError
from osr.domain.model.order import Order, OrderItem
from osr.domain.model.value_objects import Money

UNKNOWN_CUSTOMER = "Unknown"
ALL_CUSTOMERS = "all"


class MergeKey(NamedTuple):
    """Identifies interchangeable line items: same product at the same price."""

    product_id: str
    price: Money

    @staticmethod
    def of(item: OrderItem) -> MergeKey:
        return MergeKey(item.product_id, item.price)


@dataclass(frozen=True)
class CustomerScope:
    """Which customers a statement covers: everyone, or exactly one id."""

    customer_id: str | None = None

    @property
    def is_all(self) -> bool:
        return self.customer_id is None

    def matches(self, order: Order) -> bool:
        return self.is_all or order.customer_id == self.customer_id

    @staticmethod
    def all() -> CustomerScope:
        return CustomerScope(None)

    @staticmethod
    def only(customer_id: str) -> CustomerScope:
        return CustomerScope(customer_id)

    @staticmethod
    def parse(raw: str | CustomerScope) -> CustomerScope:
        """Parse ``"all"`` or a customer id."""
        if isinstance(raw, CustomerScope):
            return raw
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidInputError(f"Invalid customer scope: {raw!r}")
        raw = raw.strip()
        if raw == ALL_CUSTOMERS:
            return CustomerScope.all()
        return CustomerScope.only(raw)

    def __str__(self) -> str:
        return ALL_CUSTOMERS if self.customer_id is None else self.customer_id


@dataclass(frozen=True)
class DailySummary:
    """All of one customer's orders on a single day, items merged."""

    date: date
    total_amount: Money
    total_paid: Money
    items: tuple[OrderItem, ...]

    @property
    def balance(self) -> Money:
        return self.total_amount - self.total_paid


@dataclass(frozen=True)
class CustomerStatement:
    """Totals for one customer over the statement period."""

    customer_id: str
    customer_name: str
    orders: tuple[Order, ...]  # ascending by date
    total_amount: Money
    total_paid: Money

    @property
    def pending_amount(self) -> Money:
        return self.total_amount - self.total_paid


@dataclass(frozen=True)
class StatementResult:
    """Top-level statement for a date range and customer scope."""

    start_date: date
    end_date: date
    scope: CustomerScope
    customer_statements: tuple[CustomerStatement, ...]
    grand_total_amount: Money
    grand_total_paid: Money
    total_orders: int

    @property
    def grand_total_pending(self) -> Money:
        return self.grand_total_amount - self.grand_total_paid

    @property
    def is_empty(self) -> bool:
        return not self.customer_statements
