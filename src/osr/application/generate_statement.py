"""Application service: Generate Statement use case (query).

Filters the full order set to a date range and customer scope, hands
the survivors to the statement builder and rolls the per-customer
totals up into grand totals.
"""

from __future__ import annotations

import logging
from datetime import date, datetime

from osr.domain.model.calendar import to_utc_day
from osr.domain.model.order import Order
from osr.domain.model.statement import CustomerScope, StatementResult
from osr.domain.model.value_objects import DEFAULT_CURRENCY, Money
from osr.domain.repository.customer_directory import CustomerDirectory
from osr.domain.repository.order_repository import OrderRepository
from osr.domain.service.statement_builder import CustomerStatementBuilder

logger = logging.getLogger(__name__)


def filter_orders(
    orders: list[Order],
    start: date,
    end: date,
    scope: CustomerScope,
) -> list[Order]:
    """Keep orders dated within ``[start, end]`` (inclusive) that match *scope*."""
    return [
        order
        for order in orders
        if start <= to_utc_day(order.date) <= end and scope.matches(order)
    ]


class GenerateStatementHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_directory: CustomerDirectory,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._order_repo = order_repo
        self._builder = CustomerStatementBuilder(customer_directory, currency)
        self._currency = currency

    def handle(
        self,
        start_date: date | datetime | str,
        end_date: date | datetime | str,
        customer_scope: CustomerScope | str = "all",
    ) -> StatementResult:
        """Generate a statement.

        Raises InvalidInputError if either date or the scope cannot be
        parsed.  An empty match is not an error: the result simply has
        no customer statements and zero totals.
        """
        start = to_utc_day(start_date)
        end = to_utc_day(end_date)
        scope = CustomerScope.parse(customer_scope)

        filtered = filter_orders(self._order_repo.list_all(), start, end, scope)
        statements = self._builder.build(filtered, scope)

        # Grand totals come from the statements, not the raw orders, so
        # they always agree with the per-customer figures.
        grand_total_amount = Money.total(
            (s.total_amount for s in statements), self._currency
        )
        grand_total_paid = Money.total((s.total_paid for s in statements), self._currency)

        logger.debug(
            "Statement %s..%s scope=%s: %d orders, %d customers",
            start,
            end,
            scope,
            len(filtered),
            len(statements),
        )

        return StatementResult(
            start_date=start,
            end_date=end,
            scope=scope,
            customer_statements=tuple(statements),
            grand_total_amount=grand_total_amount,
            grand_total_paid=grand_total_paid,
            total_orders=len(filtered),
        )
