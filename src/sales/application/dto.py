"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SaleLineDTO:
    """Output: one product of a sale as displayed to the user."""

    product_id: int
    product_name: str
    price: str  # formatted, e.g. "$2.50"


@dataclass(frozen=True)
class SaleDTO:
    """Output: a complete sale as displayed to the user."""

    id: int
    customer_name: str
    items: list[SaleLineDTO]
    total: str
