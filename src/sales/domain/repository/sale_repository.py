"""Abstract repository for the Sale aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def get_by_id(self, sale_id: int) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Sale]:
        """Return every recorded sale, oldest first."""

    @abstractmethod
    def add(self, sale: Sale) -> None:
        """Record a sale. Its ID has already been assigned."""
