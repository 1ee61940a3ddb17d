"""Domain service: per-day summaries of a set of orders."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from osr.domain.model.order import Order, OrderItem
from osr.domain.model.statement import DailySummary
from osr.domain.model.value_objects import DEFAULT_CURRENCY, Money
from osr.domain.service.item_merger import merge_items


def summarize_by_date(
    orders: Iterable[Order],
    currency: str = DEFAULT_CURRENCY,
) -> list[DailySummary]:
    """Group *orders* by day and merge each day's items.

    Orders fall in the same group only when their dates are equal.
    Summaries are returned most recent day first.
    """
    by_date: dict[date, list[Order]] = {}
    for order in orders:
        by_date.setdefault(order.date, []).append(order)

    summaries = []
    for day, day_orders in by_date.items():
        items: list[OrderItem] = []
        for order in day_orders:
            items.extend(order.items)
        summaries.append(
            DailySummary(
                date=day,
                total_amount=Money.total((o.total_amount for o in day_orders), currency),
                total_paid=Money.total((o.amount_paid for o in day_orders), currency),
                items=tuple(merge_items(items)),
            )
        )

    summaries.sort(key=lambda s: s.date, reverse=True)
    return summaries
