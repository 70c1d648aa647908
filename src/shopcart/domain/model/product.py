"""Product aggregate.

Products are created once through the catalog and never change
afterwards. The cart holds references to them, never copies.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: int
    title: str
    description: str
    price: Money
