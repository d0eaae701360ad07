"""Product entity: an item of the catalog."""

from __future__ import annotations

from dataclasses import dataclass

from sales.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Immutable once built. ``id`` is not required to be unique: the
    catalog resolves duplicates by returning the first one registered.
    """

    id: int
    name: str
    price: Money
