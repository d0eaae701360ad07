"""Application service: Show Sale use case (query)."""

from __future__ import annotations

from sales.application.dto import SaleDTO, SaleLineDTO
from sales.domain.exceptions import EntityNotFoundError
from sales.domain.model.sale import Sale
from sales.domain.repository.sale_repository import SaleRepository


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository) -> None:
        self._sale_repo = sale_repo

    def handle(self, sale_id: int) -> SaleDTO:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale #{sale_id} not found")
        return self._to_dto(sale)

    @staticmethod
    def _to_dto(sale: Sale) -> SaleDTO:
        return SaleDTO(
            id=sale.id,
            customer_name=sale.customer.name,
            items=[
                SaleLineDTO(
                    product_id=product.id,
                    product_name=product.name,
                    price=str(product.price),
                )
                for product in sale.products
            ],
            total=str(sale.total),
        )
