"""Derived types for the single-day, all-customer full report."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum

from osr.domain.model.value_objects import Money, Quantity

CUSTOMER_TOTAL_LABEL = "Customer Total"
GRAND_TOTAL_LABEL = "Grand Total"


class RowKind(Enum):
    """Tags a detailed-listing row so exporters can style it."""

    ITEM = "ITEM"
    SUBTOTAL = "SUBTOTAL"
    BLANK = "BLANK"
    GRAND_TOTAL = "GRAND_TOTAL"


@dataclass(frozen=True)
class FinancialTotals:

    total: Money
    collection: Money
    order_count: int

    @property
    def pending(self) -> Money:
        return self.total - self.collection


@dataclass(frozen=True)
class CustomerTotals:

    customer_id: str
    name: str
    total: Money
    paid: Money

    @property
    def pending(self) -> Money:
        return self.total - self.paid


@dataclass(frozen=True)
class ProductTotals:
    """Quantity of one product sold on the report day."""

    product_name: str
    quantity: Quantity
    unit: str  # display unit, may be empty

    @property
    def quantity_text(self) -> str:
        return f"{self.quantity} {self.unit}".strip()


@dataclass(frozen=True)
class DetailRow:
    """One row of the detailed listing.

    ITEM rows carry every field; SUBTOTAL and GRAND_TOTAL rows carry
    only ``label`` and ``total``; BLANK rows carry nothing.
    """

    kind: RowKind
    customer_name: str = ""
    product_name: str = ""
    quantity: Quantity | None = None
    unit: str = ""
    price: Money | None = None
    total: Money | None = None
    label: str = ""

    @staticmethod
    def blank() -> DetailRow:
        return DetailRow(kind=RowKind.BLANK)


@dataclass(frozen=True)
class DailyFullReport:

    report_date: date
    financial: FinancialTotals
    customers: tuple[CustomerTotals, ...]
    products: tuple[ProductTotals, ...]
    details: tuple[DetailRow, ...]

    @property
    def grand_total(self) -> Money:
        return self.details[-1].total  # type: ignore[return-value]

    @property
    def is_empty(self) -> bool:
        return self.financial.order_count == 0

