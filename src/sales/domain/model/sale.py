"""Sale aggregate: a customer's purchase of catalog products.

The Sale owns its product sequence and running total. Products can only
be appended; nothing is ever removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money


@dataclass
class Sale:
    """Aggregate root for sales.

    Invariant: ``total`` always equals the sum of the prices of
    ``products``. Both change only through ``add_product()``.

    The ``id`` is handed out by the ``SalesSystem`` facade.
    """

    id: int
    customer: Customer
    _products: list[Product] = field(default_factory=list, init=False, repr=False)
    _total: Money = field(default_factory=Money.zero, init=False)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def total(self) -> Money:
        return self._total

    def add_product(self, product: Product) -> None:
        """Append *product* and add its price to the running total."""
        self._products.append(product)
        self._total = self._total + product.price
