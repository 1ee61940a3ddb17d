"""JSON-file-backed, read-only implementation of CustomerDirectory."""

from __future__ import annotations

from pathlib import Path

from osr.domain.model.customer import Customer
from osr.domain.repository.customer_directory import CustomerDirectory
from osr.infrastructure.persistence.json_file import load_records, required, text


class JsonCustomerDirectory(CustomerDirectory):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._load().get(customer_id)

    def list_all(self) -> list[Customer]:
        return list(self._load().values())

    def _load(self) -> dict[str, Customer]:
        source = self._file_path.name
        customers = (
            Customer(id=str(required(item, "id", source)), name=text(item.get("name")))
            for item in load_records(self._file_path)
        )
        return {c.id: c for c in customers}
