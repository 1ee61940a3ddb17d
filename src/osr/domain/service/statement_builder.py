"""Domain service: build per-customer statements from filtered orders.

Customer names are resolved differently depending on the scope:

- for *all customers* the name comes from the first order of each
  customer's group (the denormalised ``customer_name``);
- for a single customer it is looked up in the customer directory.

Both fall back to ``"Unknown"``.  The two paths can disagree when a
customer was renamed after ordering; that behaviour is kept as-is.
"""

from __future__ import annotations

from collections.abc import Iterable

from osr.domain.model.order import Order
from osr.domain.model.statement import (
    UNKNOWN_CUSTOMER,
    CustomerScope,
    CustomerStatement,
)
from osr.domain.model.value_objects import DEFAULT_CURRENCY, Money
from osr.domain.repository.customer_directory import CustomerDirectory
from osr.domain.service.collation import collation_key


class CustomerStatementBuilder:

    def __init__(
        self,
        customer_directory: CustomerDirectory,
        currency: str = DEFAULT_CURRENCY,
    ) -> None:
        self._customer_directory = customer_directory
        self._currency = currency

    def build(
        self,
        orders: Iterable[Order],
        scope: CustomerScope,
    ) -> list[CustomerStatement]:
        """Return one statement per customer, sorted by customer name."""
        if scope.is_all:
            statements = self._build_for_all(orders)
        else:
            statements = self._build_for_one(orders, scope.customer_id)  # type: ignore[arg-type]
        statements.sort(key=lambda s: collation_key(s.customer_name))
        return statements

    # --- Scopes ---------------------------------------------------------------

    def _build_for_all(self, orders: Iterable[Order]) -> list[CustomerStatement]:
        by_customer: dict[str, list[Order]] = {}
        for order in orders:
            by_customer.setdefault(order.customer_id, []).append(order)

        return [
            self._statement(
                customer_id,
                customer_orders[0].customer_name or UNKNOWN_CUSTOMER,
                customer_orders,
            )
            for customer_id, customer_orders in by_customer.items()
        ]

    def _build_for_one(
        self,
        orders: Iterable[Order],
        customer_id: str,
    ) -> list[CustomerStatement]:
        customer_orders = [o for o in orders if o.customer_id == customer_id]
        if not customer_orders:
            return []

        customer = self._customer_directory.get_by_id(customer_id)
        name = customer.name if customer is not None and customer.name else UNKNOWN_CUSTOMER
        return [self._statement(customer_id, name, customer_orders)]

    # --- Internal helpers -----------------------------------------------------

    def _statement(
        self,
        customer_id: str,
        customer_name: str,
        orders: list[Order],
    ) -> CustomerStatement:
        return CustomerStatement(
            customer_id=customer_id,
            customer_name=customer_name,
            orders=tuple(sorted(orders, key=lambda o: o.date)),
            total_amount=Money.total((o.total_amount for o in orders), self._currency),
            total_paid=Money.total((o.amount_paid for o in orders), self._currency),
        )
