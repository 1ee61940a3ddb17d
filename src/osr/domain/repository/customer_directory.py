"""Abstract read-only lookup of customers by id."""

from __future__ import annotations

from abc import ABC, abstractmethod

from osr.domain.model.customer import Customer


class CustomerDirectory(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer in the directory."""
