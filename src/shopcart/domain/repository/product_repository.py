"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Return how many products the catalog holds."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Append a new product to the catalog."""
