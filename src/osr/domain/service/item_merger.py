"""Domain service: merge interchangeable line items.

Items with the same product at the same unit price are collapsed into
one line whose quantity and total are the sums of the originals.
"""

from __future__ import annotations

from collections.abc import Iterable

from osr.domain.model.order import OrderItem
from osr.domain.model.statement import MergeKey
from osr.domain.service.collation import collation_key


def merge_items(items: Iterable[OrderItem]) -> list[OrderItem]:
    """Merge *items* by ``(product_id, price)``.

    Fields other than ``quantity`` and ``total`` come from the first
    occurrence of each key.  The result is sorted by product name;
    keys with equal names keep their first-seen order.
    """
    merged: dict[MergeKey, OrderItem] = {}
    for item in items:
        key = MergeKey.of(item)
        existing = merged.get(key)
        if existing is None:
            merged[key] = item
        else:
            merged[key] = OrderItem(
                product_id=existing.product_id,
                product_name=existing.product_name,
                quantity=existing.quantity + item.quantity,
                unit=existing.unit,
                price=existing.price,
                total=existing.total + item.total,
            )
    return sorted(merged.values(), key=lambda i: collation_key(i.product_name))
