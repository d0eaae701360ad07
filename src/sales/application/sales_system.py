"""Application service: the SalesSystem facade.

Every operation of the program goes through this class. It owns the
customer, catalog and sale collections together with the sale ID
counter, and reports the outcome of each sale as human-readable status
lines instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import click

from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.sale import Sale
from sales.domain.repository.customer_repository import CustomerRepository
from sales.domain.repository.product_repository import ProductRepository
from sales.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class SalesSystem:

    def __init__(
        self,
        customer_repo: CustomerRepository,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        echo: Callable[[str], None] = click.echo,
    ) -> None:
        self._customers = customer_repo
        self._catalog = product_repo
        self._sales = sale_repo
        self._echo = echo
        self._next_sale_id = 1

    # --- Registration ---------------------------------------------------------

    def add_customer(self, customer: Customer | None) -> None:
        """Register a customer. ``None`` is ignored."""
        if customer is None:
            return
        self._customers.add(customer)
        logger.debug("Registered customer #%s (%s)", customer.id, customer.name)

    def add_product(self, product: Product | None) -> None:
        """Add a product to the catalog. ``None`` is ignored."""
        if product is None:
            return
        self._catalog.add(product)
        logger.debug("Added product #%s (%s) at %s", product.id, product.name, product.price)

    # --- Transactions ---------------------------------------------------------

    def record_sale(self, customer_id: int, product_ids: Iterable[int]) -> Sale | None:
        """Record a sale of *product_ids* to the customer *customer_id*.

        Steps:
        1. Resolve the customer. Unknown customer -> report, return None.
           No sale is created and the ID counter does not move.
        2. Open a Sale with the next ID.
        3. Add each product in order; unknown IDs are reported and skipped.
        4. Keep the sale (even an empty one) and report its total.
        """
        customer = self._find_customer_by_id(customer_id)
        if customer is None:
            logger.warning("Sale rejected: customer #%s not found", customer_id)
            self._echo("Customer not found.")
            return None

        sale = Sale(id=self._next_sale_id, customer=customer)
        self._next_sale_id += 1
        logger.debug("Opened sale #%s for customer #%s", sale.id, customer.id)

        for product_id in product_ids:
            product = self._find_product_by_id(product_id)
            if product is None:
                logger.warning("Sale #%s: product #%s not found", sale.id, product_id)
                self._echo(f"Product with id {product_id} not found.")
                continue
            sale.add_product(product)

        self._sales.add(sale)
        logger.info(
            "Sale #%s recorded with %d product(s), total %s",
            sale.id, len(sale.products), sale.total,
        )
        self._echo(f"Sale completed successfully. Total: {sale.total}")
        return sale

    # --- Read-only views ------------------------------------------------------

    @property
    def customers(self) -> tuple[Customer, ...]:
        return tuple(self._customers.list_all())

    @property
    def catalog(self) -> tuple[Product, ...]:
        return tuple(self._catalog.list_all())

    @property
    def sales(self) -> tuple[Sale, ...]:
        return tuple(self._sales.list_all())

    @property
    def next_sale_id(self) -> int:
        return self._next_sale_id

    # --- Internal helpers -----------------------------------------------------

    def _find_customer_by_id(self, customer_id: int) -> Customer | None:
        return self._customers.get_by_id(customer_id)

    def _find_product_by_id(self, product_id: int) -> Product | None:
        return self._catalog.get_by_id(product_id)
