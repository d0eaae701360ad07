"""CLI commands that drive the SalesSystem facade.

Nothing is persisted: every invocation starts from an empty system,
registers what the options describe and records the requested sales.
"""

from __future__ import annotations

import click

from sales.application.dto import SaleDTO
from sales.application.sales_system import SalesSystem
from sales.application.show_sale import ShowSaleHandler
from sales.domain.exceptions import DomainException
from sales.domain.model.customer import Customer
from sales.domain.model.product import Product
from sales.domain.model.value_objects import Money
from sales.domain.repository.sale_repository import SaleRepository
from sales.infrastructure.bootstrap import sale_repository, sales_system


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{raw.strip()}'.")


def _parse_customer(raw: str) -> Customer:
    """Parse '1:Ana:Calle 1' into a Customer."""
    parts = raw.split(":", 2)
    if len(parts) != 3:
        raise click.BadParameter(
            f"Invalid customer '{raw}'. Expected 'ID:Name:Address'."
        )
    customer_id, name, address = parts
    return Customer(
        id=_parse_int(customer_id, "customer id"),
        name=name.strip(),
        address=address.strip(),
    )


def _parse_product(raw: str) -> Product:
    """Parse '1:Pan:2.50' into a Product."""
    parts = raw.split(":", 1)
    if len(parts) != 2 or ":" not in parts[1]:
        raise click.BadParameter(
            f"Invalid product '{raw}'. Expected 'ID:Name:Price'."
        )
    name, price = parts[1].rsplit(":", 1)
    try:
        money = Money.of(price.strip())
    except DomainException as exc:
        raise click.BadParameter(str(exc))
    return Product(
        id=_parse_int(parts[0], "product id"),
        name=name.strip(),
        price=money,
    )


def _parse_sale(raw: str) -> tuple[int, list[int]]:
    """Parse '1:1,2,99' into (customer_id, [product_id, ...])."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid sale '{raw}'. Expected 'CustomerID:ProductID,ProductID'."
        )
    customer_id, product_ids = raw.split(":", 1)
    return (
        _parse_int(customer_id, "customer id"),
        [_parse_int(pid, "product id") for pid in product_ids.split(",") if pid.strip()],
    )


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for a sale receipt."""
    click.echo()
    click.echo(f"Sale #{dto.id}")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"  {'ID':<6} {'Product':<20} {'Price':>10}")
    click.echo(f"  {'-'*38}")
    for item in dto.items:
        click.echo(f"  {item.product_id:<6} {item.product_name:<20} {item.price:>10}")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Sale Total':<27} {dto.total:>10}")


def _print_receipts(system: SalesSystem, sale_repo: SaleRepository) -> None:
    handler = ShowSaleHandler(sale_repo=sale_repo)
    for sale in system.sales:
        try:
            dto = handler.handle(sale.id)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        _display_sale(dto)


@click.command("demo")
def sales_demo() -> None:
    """Run a sample session: one customer, two products, two sales."""
    sale_repo = sale_repository()
    system = sales_system(sale_repo)

    system.add_customer(Customer(id=1, name="Ana", address="Calle 1"))
    system.add_product(Product(id=1, name="Pan", price=Money.of("2.50")))
    system.add_product(Product(id=2, name="Leche", price=Money.of("3.00")))

    system.record_sale(1, [1, 2, 99])
    system.record_sale(42, [1])

    _print_receipts(system, sale_repo)


@click.command("run")
@click.option("--customer", "customers", multiple=True, help="Customer as 'ID:Name:Address'. Repeatable.")
@click.option("--product", "products", multiple=True, help="Product as 'ID:Name:Price'. Repeatable.")
@click.option("--sale", "sale_specs", multiple=True, help="Sale as 'CustomerID:ProductID,ProductID'. Repeatable.")
@click.option("--receipts", is_flag=True, default=False, help="Print a receipt for every recorded sale.")
def sales_run(
    customers: tuple[str, ...],
    products: tuple[str, ...],
    sale_specs: tuple[str, ...],
    receipts: bool,
) -> None:
    """Register customers and products, then record sales in order."""
    parsed_customers = [_parse_customer(raw) for raw in customers]
    parsed_products = [_parse_product(raw) for raw in products]
    parsed_sales = [_parse_sale(raw) for raw in sale_specs]

    sale_repo = sale_repository()
    system = sales_system(sale_repo)

    for customer in parsed_customers:
        system.add_customer(customer)
    for product in parsed_products:
        system.add_product(product)
    for customer_id, product_ids in parsed_sales:
        system.record_sale(customer_id, product_ids)

    if receipts:
        _print_receipts(system, sale_repo)
