"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Callable

import click

from sales.application.sales_system import SalesSystem
from sales.domain.repository.sale_repository import SaleRepository
from sales.infrastructure.memory.list_customer_repository import (
    ListCustomerRepository,
)
from sales.infrastructure.memory.list_product_repository import (
    ListProductRepository,
)
from sales.infrastructure.memory.list_sale_repository import ListSaleRepository


def customer_repository() -> ListCustomerRepository:
    return ListCustomerRepository()


def product_repository() -> ListProductRepository:
    return ListProductRepository()


def sale_repository() -> ListSaleRepository:
    return ListSaleRepository()


def sales_system(
    sale_repo: SaleRepository | None = None,
    echo: Callable[[str], None] = click.echo,
) -> SalesSystem:
    """Build an empty SalesSystem.

    Pass *sale_repo* when the caller also needs to query the recorded
    sales directly (e.g. to print receipts).
    """
    return SalesSystem(
        customer_repo=customer_repository(),
        product_repo=product_repository(),
        sale_repo=sale_repo if sale_repo is not None else sale_repository(),
        echo=echo,
    )
