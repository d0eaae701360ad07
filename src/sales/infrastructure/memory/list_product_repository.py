"""List-backed implementation of ProductRepository.

A list rather than a dict keyed by ID: lookups scan in registration
order so the first product registered under an ID wins.
"""

from __future__ import annotations

from sales.domain.model.product import Product
from sales.domain.repository.product_repository import ProductRepository


class ListProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._items: list[Product] = list(products or [])

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._items:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._items)

    def add(self, product: Product) -> None:
        self._items.append(product)
