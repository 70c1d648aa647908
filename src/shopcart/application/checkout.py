"""Application service: Checkout use case.

Checks that there is something to buy and someone to ship it to, then
records the buyer on the cart and builds the receipt.  The cart is left
as it is afterwards.
"""

from __future__ import annotations

import logging

from shopcart.application.dto import CartDTO, ReceiptDTO
from shopcart.domain.exceptions import EmptyCartError, MissingBuyerInfoError
from shopcart.domain.formatting import format_receipt
from shopcart.domain.model.cart import Cart
from shopcart.domain.validation import require_text

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def ensure_not_empty(self) -> None:
        if self._cart.is_empty:
            logger.debug("Checkout refused: cart is empty")
            raise EmptyCartError()

    def handle(self, name: str | None, address: str | None) -> ReceiptDTO:
        self.ensure_not_empty()

        clean_name = require_text(name)
        clean_address = require_text(address)
        if clean_name is None or clean_address is None:
            logger.debug("Checkout refused: missing name or address")
            raise MissingBuyerInfoError()

        self._cart.set_buyer(clean_name, clean_address)
        logger.info(
            "Checkout for %r: %d item(s), total %s",
            clean_name,
            self._cart.item_count,
            self._cart.total,
        )
        return ReceiptDTO(
            name=clean_name,
            address=clean_address,
            cart=CartDTO.from_cart(self._cart),
            text=format_receipt(clean_name, clean_address, self._cart),
        )
