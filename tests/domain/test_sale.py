"""Unit tests for the Sale aggregate and its running total."""

import pytest

from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.sale import Sale
from sales.domain.model.value_objects import Money


def _make_product(pid: int = 1, price: str = "2.50") -> Product:
    return Product(id=pid, name=f"P{pid}", price=Money.of(price))


def _make_sale() -> Sale:
    return Sale(id=1, customer=Customer(id=1, name="Ana", address="Calle 1"))


class TestSaleCreation:

    def test_starts_empty(self):
        sale = _make_sale()
        assert sale.id == 1
        assert sale.customer.name == "Ana"
        assert sale.products == ()
        assert sale.total == Money.zero()


class TestAddProduct:

    def test_appends_and_updates_total(self):
        sale = _make_sale()
        sale.add_product(_make_product(1, "2.50"))
        assert len(sale.products) == 1
        assert sale.total == Money.of("2.50")

    def test_total_matches_sum_after_every_call(self):
        sale = _make_sale()
        prices = ["2.50", "3.00", "0.10", "0.20", "-1.00", "19.99"]
        for i, price in enumerate(prices, start=1):
            sale.add_product(_make_product(i, price))
            expected = Money.zero()
            for product in sale.products:
                expected = expected + product.price
            assert sale.total == expected
        assert sale.total == Money.of("24.79")

    def test_preserves_order_and_duplicates(self):
        sale = _make_sale()
        pan = _make_product(1, "2.50")
        leche = _make_product(2, "3.00")
        sale.add_product(pan)
        sale.add_product(leche)
        sale.add_product(pan)
        assert sale.products == (pan, leche, pan)
        assert sale.total == Money.of("8.00")

    def test_products_view_cannot_mutate_sale(self):
        sale = _make_sale()
        sale.add_product(_make_product())
        view = list(sale.products)
        view.clear()
        assert len(sale.products) == 1

    def test_total_is_read_only(self):
        sale = _make_sale()
        sale.add_product(_make_product(1, "2.50"))
        with pytest.raises(AttributeError):
            sale.total = Money.of("99")
        assert sale.total == Money.of("2.50")
