"""List-backed implementation of SaleRepository."""

from __future__ import annotations

from sales.domain.model.sale import Sale
from sales.domain.repository.sale_repository import SaleRepository


class ListSaleRepository(SaleRepository):

    def __init__(self, sales: list[Sale] | None = None) -> None:
        self._items: list[Sale] = list(sales or [])

    def get_by_id(self, sale_id: int) -> Sale | None:
        for sale in self._items:
            if sale.id == sale_id:
                return sale
        return None

    def list_all(self) -> list[Sale]:
        return list(self._items)

    def add(self, sale: Sale) -> None:
        self._items.append(sale)
