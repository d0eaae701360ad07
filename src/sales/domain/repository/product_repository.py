"""Abstract repository for the product catalog."""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return the first product registered with this ID, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in registration order."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Add a product to the catalog. Duplicate IDs are accepted."""
