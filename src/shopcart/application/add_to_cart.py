"""Application service: Add To Cart use case.

Resolves the product through the catalog, validates the requested
quantity and lets the Cart aggregate merge or append the line.
Nothing is mutated until every check has passed.
"""

from __future__ import annotations

import logging

from shopcart.domain.exceptions import EntityNotFoundError, InvalidIdentifierError
from shopcart.domain.model.cart import Cart, CartLine
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Quantity
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.domain.validation import is_integer_in_range, parse_int

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository, cart: Cart) -> None:
        self._product_repo = product_repo
        self._cart = cart

    def lookup(self, product_id: str | int | None) -> Product:
        """Resolve raw identifier input to a catalog product."""
        parsed = parse_int(product_id) if product_id is not None else None
        if parsed is None or not is_integer_in_range(parsed, 1):
            logger.debug("Rejected product identifier %r", product_id)
            raise InvalidIdentifierError()

        product = self._product_repo.get_by_id(parsed)
        if product is None:
            logger.debug("Product #%d not in catalog", parsed)
            raise EntityNotFoundError()
        return product

    def handle(
        self,
        product_id: str | int | None,
        quantity: str | int | None,
    ) -> CartLine:
        """Add *quantity* units of a product to the cart.

        Re-adding a product already in the cart increases that line's
        quantity; the merged quantity is not re-checked against the cap.
        """
        product = self.lookup(product_id)
        requested = Quantity.parse(quantity)

        line = self._cart.add(product, requested)
        logger.info(
            "Cart: %s x%d (line now %d, total %s)",
            product.title,
            requested.value,
            line.quantity,
            self._cart.total,
        )
        return line
