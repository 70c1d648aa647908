"""In-memory implementation of ProductRepository.

The catalog lives only as long as the process does.
"""

from __future__ import annotations

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository

DEFAULT_PRODUCTS = (
    Product(
        id=1,
        title="HTML húfa",
        description=(
            "Húfa sem heldur hausnum heitum og hvíslar hugsanlega að þér "
            "hvaða element væri best að nota."
        ),
        price=Money(5_000),
    ),
    Product(
        id=2,
        title="CSS sokkar",
        description="Sokkar sem skalast vel með hvaða fótum sem er.",
        price=Money(3_000),
    ),
    Product(
        id=3,
        title="JavaScript jakki",
        description="Mjög töff jakki fyrir öll sem skrifa JavaScript reglulega.",
        price=Money(20_000),
    ),
)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)

    def count(self) -> int:
        return len(self._products)

    def save(self, product: Product) -> None:
        self._products.append(product)
