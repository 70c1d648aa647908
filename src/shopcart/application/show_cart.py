"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartDTO
from shopcart.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO.from_cart(self._cart)
