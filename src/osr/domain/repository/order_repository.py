"""Abstract read-only repository for orders.

Orders are owned by an external data store; the reporting engine
never writes them back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from osr.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order in the store."""
