"""JSON-file-backed, read-only implementation of ProductCatalog."""

from __future__ import annotations

from pathlib import Path

from osr.domain.model.product import DEFAULT_UNIT, Product
from osr.domain.repository.product_catalog import ProductCatalog
from osr.infrastructure.persistence.json_file import load_records, required, text


class JsonProductCatalog(ProductCatalog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def _load(self) -> dict[str, Product]:
        source = self._file_path.name
        products = (
            Product(
                id=str(required(item, "id", source)),
                name=str(required(item, "name", source)),
                unit=text(item.get("unit"), DEFAULT_UNIT),
            )
            for item in load_records(self._file_path)
        )
        return {p.id: p for p in products}
