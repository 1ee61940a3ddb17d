"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from osr.infrastructure.config import Settings
from osr.infrastructure.persistence.json_customer_directory import (
    JsonCustomerDirectory,
)
from osr.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from osr.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)


def settings() -> Settings:
    return Settings.from_env()


def order_repository(config: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(config.data_dir / "orders.json", currency=config.currency)


def customer_directory(config: Settings) -> JsonCustomerDirectory:
    return JsonCustomerDirectory(config.data_dir / "customers.json")


def product_catalog(config: Settings) -> JsonProductCatalog:
    return JsonProductCatalog(config.data_dir / "products.json")
