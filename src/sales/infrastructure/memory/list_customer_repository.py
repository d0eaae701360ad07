"""List-backed implementation of CustomerRepository."""

from __future__ import annotations

from sales.domain.model.customer import Customer
from sales.domain.repository.customer_repository import CustomerRepository


class ListCustomerRepository(CustomerRepository):

    def __init__(self, customers: list[Customer] | None = None) -> None:
        self._items: list[Customer] = list(customers or [])

    def get_by_id(self, customer_id: int) -> Customer | None:
        for customer in self._items:
            if customer.id == customer_id:
                return customer
        return None

    def list_all(self) -> list[Customer]:
        return list(self._items)

    def add(self, customer: Customer) -> None:
        self._items.append(customer)
