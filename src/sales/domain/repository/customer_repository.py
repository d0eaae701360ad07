"""Abstract repository for Customer entities.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.customer import Customer


class CustomerRepository(ABC):

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return the first customer registered with this ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Customer]:
        """Return every customer in registration order."""

    @abstractmethod
    def add(self, customer: Customer) -> None:
        """Register a customer. Duplicate IDs are accepted."""
