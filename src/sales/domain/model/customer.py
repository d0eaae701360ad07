"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """A registered customer. Same duplicate-id rule as ``Product``."""

    id: int
    name: str
    address: str
