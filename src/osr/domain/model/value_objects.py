"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so non-finite amounts can never reach
the aggregation code.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from osr.domain.exceptions import DataIntegrityError

DEFAULT_CURRENCY = "INR"
_CENT = Decimal("0.01")

_SYMBOLS = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def currency_symbol(currency: str) -> str:
    return _SYMBOLS.get(currency, f"{currency} ")


def _to_decimal(value: str | float | int | Decimal, what: str) -> Decimal:
    if isinstance(value, bool):
        raise DataIntegrityError(f"Invalid {what}: {value!r}")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise DataIntegrityError(f"Invalid {what}: {value!r}") from exc
    if not result.is_finite():
        raise DataIntegrityError(f"{what.capitalize()} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so that totals are exact and folding the same amounts
    in the same order always yields the same result.  Unlike line-item
    prices, a Money may be negative: an overpaid balance is legitimate.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise DataIntegrityError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise DataIntegrityError(
                f"Money amount must be finite, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    @property
    def is_negative(self) -> bool:
        return self.amount < Decimal("0")

    # --- Display --------------------------------------------------------------

    @property
    def symbol(self) -> str:
        return currency_symbol(self.currency)

    def __str__(self) -> str:
        # half-cents round up
        return f"{self.symbol}{self.amount.quantize(_CENT, rounding=ROUND_HALF_UP)}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise DataIntegrityError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(_to_decimal(amount, "money amount"), currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        """Left-to-right fold of *amounts*.

        The fold starts from the first amount so its currency wins;
        *currency* is only used for the zero returned on empty input.
        """
        result: Money | None = None
        for amount in amounts:
            result = amount if result is None else result + amount
        return result if result is not None else Money.zero(currency)


@dataclass(frozen=True)
class Quantity:
    """A non-negative, unit-dependent quantity (litres, pieces, kg...).

    Fractional values are allowed; negative ones are rejected since a
    negative sold quantity would silently corrupt the totals.
    """

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise DataIntegrityError(
                f"Quantity must be a Decimal, got {type(self.value).__name__}"
            )
        if not self.value.is_finite():
            raise DataIntegrityError(f"Quantity must be finite, got {self.value}")
        if self.value < Decimal("0"):
            raise DataIntegrityError(f"Quantity cannot be negative, got {self.value}")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        # 2.000 -> "2", 0.50 -> "0.5"
        text = f"{self.value:f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    @staticmethod
    def of(value: str | float | int | Decimal) -> Quantity:
        return Quantity(_to_decimal(value, "quantity"))
