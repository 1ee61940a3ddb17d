"""Domain service: the single-day, all-customer full report.

Works independently of the statement path.  Four rollups are built
over the orders dated exactly on the report day:

- financial totals (collection, total, pending, order count);
- per-customer totals, in the order customers first appear;
- per-product quantities keyed by product *name*, labelled with the
  catalog unit of the first item seen for that name;
- a detailed listing, one row per item, grouped by customer with a
  subtotal and a blank separator after each, closed by a grand total.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from osr.domain.model.daily_report import (
    CUSTOMER_TOTAL_LABEL,
    GRAND_TOTAL_LABEL,
    CustomerTotals,
    DailyFullReport,
    DetailRow,
    FinancialTotals,
    ProductTotals,
    RowKind,
)
from osr.domain.model.order import Order
from osr.domain.model.product import DEFAULT_UNIT, display_unit
from osr.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from osr.domain.repository.product_catalog import ProductCatalog
from osr.domain.service.collation import collation_key


class DailyReportAggregator:

    def __init__(
        self,
        product_catalog: ProductCatalog,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._product_catalog = product_catalog
        self._currency = currency

    def aggregate(self, orders: Iterable[Order], report_date: date) -> DailyFullReport:
        day_orders = [o for o in orders if o.date == report_date]
        return DailyFullReport(
            report_date=report_date,
            financial=self._financial(day_orders),
            customers=tuple(self._customers(day_orders)),
            products=tuple(self._products(day_orders)),
            details=tuple(self._details(day_orders)),
        )

    # --- Rollups --------------------------------------------------------------

    def _financial(self, orders: list[Order]) -> FinancialTotals:
        return FinancialTotals(
            total=self._sum(o.total_amount for o in orders),
            collection=self._sum(o.amount_paid for o in orders),
            order_count=len(orders),
        )

    def _customers(self, orders: list[Order]) -> list[CustomerTotals]:
        by_customer = _group_by_customer(orders)
        return [
            CustomerTotals(
                customer_id=customer_id,
                name=customer_orders[0].customer_name,
                total=self._sum(o.total_amount for o in customer_orders),
                paid=self._sum(o.amount_paid for o in customer_orders),
            )
            for customer_id, customer_orders in by_customer.items()
        ]

    def _products(self, orders: list[Order]) -> list[ProductTotals]:
        quantities: dict[str, Quantity] = {}
        units: dict[str, str] = {}
        for order in orders:
            for item in order.items:
                if item.product_name not in quantities:
                    quantities[item.product_name] = item.quantity
                    units[item.product_name] = self._unit_for(item.product_id)
                else:
                    quantities[item.product_name] += item.quantity
        return [
            ProductTotals(product_name=name, quantity=quantity, unit=units[name])
            for name, quantity in quantities.items()
        ]

    def _details(self, orders: list[Order]) -> list[DetailRow]:
        groups = sorted(
            _group_by_customer(orders).values(),
            key=lambda group: collation_key(group[0].customer_name),
        )

        rows: list[DetailRow] = []
        subtotals: list[Money] = []
        for customer_orders in groups:
            customer_name = customer_orders[0].customer_name
            items = [item for order in customer_orders for item in order.items]
            for item in items:
                rows.append(
                    DetailRow(
                        kind=RowKind.ITEM,
                        customer_name=customer_name,
                        product_name=item.product_name,
                        quantity=item.quantity,
                        unit=item.unit,
                        price=item.price,
                        total=item.total,
                    )
                )
            subtotal = self._sum(item.total for item in items)
            subtotals.append(subtotal)
            rows.append(
                DetailRow(kind=RowKind.SUBTOTAL, label=CUSTOMER_TOTAL_LABEL, total=subtotal)
            )
            rows.append(DetailRow.blank())

        rows.append(
            DetailRow(
                kind=RowKind.GRAND_TOTAL,
                label=GRAND_TOTAL_LABEL,
                total=self._sum(subtotals),
            )
        )
        return rows

    # --- Internal helpers -----------------------------------------------------

    def _unit_for(self, product_id: str) -> str:
        product = self._product_catalog.get_by_id(product_id)
        base_unit = product.unit if product is not None and product.unit else DEFAULT_UNIT
        return display_unit(base_unit)

    def _sum(self, amounts: Iterable[Money]) -> Money:
        return Money.total(amounts, self._currency)


def _group_by_customer(orders: list[Order]) -> dict[str, list[Order]]:
    grouped: dict[str, list[Order]] = {}
    for order in orders:
        grouped.setdefault(order.customer_id, []).append(order)
    return grouped
