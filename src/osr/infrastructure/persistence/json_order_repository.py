"""JSON-file-backed, read-only implementation of OrderRepository."""

from __future__ import annotations

from pathlib import Path

from osr.domain.model.order import Order, OrderItem
from osr.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from osr.domain.repository.order_repository import OrderRepository
from osr.infrastructure.persistence.json_file import load_records, required, text


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, currency: str = DEFAULT_CURRENCY) -> None:
        self._file_path = file_path
        self._currency = currency

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in load_records(self._file_path)]

    # --- Deserialization ------------------------------------------------------

    def _to_domain(self, raw: dict) -> Order:
        source = f"{self._file_path.name} order {raw.get('id', '?')!r}"
        paid = raw.get("amount_paid")
        return Order.create(
            id=str(required(raw, "id", source)),
            customer_id=str(required(raw, "customer_id", source)),
            customer_name=text(raw.get("customer_name")),
            date=required(raw, "date", source),  # type: ignore[arg-type]
            total_amount=self._money(required(raw, "total_amount", source)),
            amount_paid=self._money(paid) if paid is not None else None,
            items=[self._item(i, source) for i in raw.get("items") or []],
        )

    def _item(self, raw: dict, source: str) -> OrderItem:
        return OrderItem(
            product_id=str(required(raw, "product_id", source)),
            product_name=str(required(raw, "product_name", source)),
            quantity=Quantity.of(required(raw, "quantity", source)),  # type: ignore[arg-type]
            unit=text(raw.get("unit")),
            price=self._money(required(raw, "price", source)),
            total=self._money(required(raw, "total", source)),
        )

    def _money(self, value: object) -> Money:
        return Money.of(value, self._currency)  # type: ignore[arg-type]
