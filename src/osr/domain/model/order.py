"""Order records as read from the external data store.

Orders and their line items are immutable here: the reporting engine
only ever reads them.  Integrity checks run on construction so a
corrupt record fails loudly instead of skewing a financial total.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from osr.domain.exceptions import DataIntegrityError
from osr.domain.model.calendar import to_utc_day
from osr.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderItem:
    """One line of an order.

    ``total`` is stored independently of ``price`` and ``quantity`` and
    is authoritative: it is never recomputed from the two.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit: str
    price: Money
    total: Money

    def __post_init__(self) -> None:
        if self.price.is_negative:
            raise DataIntegrityError(
                f"Price of {self.product_name} cannot be negative, got {self.price}"
            )
        if self.total.is_negative:
            raise DataIntegrityError(
                f"Total of {self.product_name} cannot be negative, got {self.total}"
            )


@dataclass(frozen=True)
class Order:
    """A customer's order for one calendar day.

    ``customer_name`` is denormalised from the customer directory at
    the time the order was taken.  ``date`` is always a UTC calendar
    day; use ``Order.create()`` to normalise raw dates.  A missing
    ``amount_paid`` is zero in the currency of ``total_amount``.
    """

    id: str
    customer_id: str
    customer_name: str
    date: date
    total_amount: Money
    amount_paid: Money = None  # type: ignore[assignment]
    items: tuple[OrderItem, ...] = ()

    def __post_init__(self) -> None:
        if self.amount_paid is None:
            object.__setattr__(self, "amount_paid", Money.zero(self.total_amount.currency))
        if self.total_amount.is_negative:
            raise DataIntegrityError(
                f"Order {self.id}: total amount cannot be negative, got {self.total_amount}"
            )
        if self.amount_paid.is_negative:
            raise DataIntegrityError(
                f"Order {self.id}: amount paid cannot be negative, got {self.amount_paid}"
            )

    @staticmethod
    def create(
        id: str,
        customer_id: str,
        customer_name: str,
        date: date | str,
        total_amount: Money,
        amount_paid: Money | None = None,
        items: list[OrderItem] | tuple[OrderItem, ...] = (),
    ) -> Order:
        """Build an order from loosely-typed input.

        The date is normalised to its UTC calendar day and a missing
        ``amount_paid`` is treated as nothing paid.
        """
        return Order(
            id=id,
            customer_id=customer_id,
            customer_name=customer_name,
            date=to_utc_day(date),
            total_amount=total_amount,
            amount_paid=amount_paid,
            items=tuple(items),
        )
