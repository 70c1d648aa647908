"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CatalogEntryDTO
from shopcart.domain.formatting import format_catalog_entry
from shopcart.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogEntryDTO]:
        return [
            CatalogEntryDTO(
                index=index,
                id=product.id,
                title=product.title,
                description=product.description,
                price=str(product.price),
                text=format_catalog_entry(index, product),
            )
            for index, product in enumerate(self._product_repo.list_all(), start=1)
        ]
