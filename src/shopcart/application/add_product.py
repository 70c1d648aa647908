"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import (
    DESCRIPTION_REQUIRED,
    PRICE_INVALID,
    TITLE_REQUIRED,
    ValidationError,
)
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.validation import is_integer_in_range, parse_int, require_text

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        title: str | None,
        description: str | None,
        price: str | int | None,
    ) -> Product:
        """Add a new product to the catalog.

        Fields are checked in prompt order (title, description, price) so
        the first invalid one is the one reported.
        """
        clean_title = self.check_title(title)
        clean_description = self.check_description(description)
        amount = self.check_price(price)

        # Sequential ID: products are never removed, so size + 1 is unique
        next_id = self._product_repo.count() + 1

        product = Product(
            id=next_id,
            title=clean_title,
            description=clean_description,
            price=amount,
        )
        self._product_repo.save(product)
        logger.info("Added product #%d %r at %s", product.id, product.title, product.price)
        return product

    # --- Field checks ---------------------------------------------------------

    @staticmethod
    def check_title(raw: str | None) -> str:
        title = require_text(raw)
        if title is None:
            logger.debug("Rejected product: empty title")
            raise ValidationError(TITLE_REQUIRED)
        return title

    @staticmethod
    def check_description(raw: str | None) -> str:
        description = require_text(raw)
        if description is None:
            logger.debug("Rejected product: empty description")
            raise ValidationError(DESCRIPTION_REQUIRED)
        return description

    @staticmethod
    def check_price(raw: str | int | None) -> Money:
        amount = parse_int(raw) if raw is not None else None
        if amount is None or not is_integer_in_range(amount, 1):
            logger.debug("Rejected product: invalid price %r", raw)
            raise ValidationError(PRICE_INVALID)
        return Money(amount)
