"""Interactive shop session.

Drives the use cases from prompted answers, one action at a time.
Every domain failure is echoed to stderr and aborts the current action
only; the session itself keeps going.
"""

from __future__ import annotations

from typing import Callable

from shopcart.application.add_product import AddProductHandler
from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.checkout import CheckoutHandler
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import DomainException
from shopcart.domain.formatting import format_product
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.product_repository import ProductRepository
from shopcart.infrastructure.cli.prompter import Prompter


class ShopSession:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart: Cart,
        prompter: Prompter,
        echo: Callable[..., None],
    ) -> None:
        self.product_repo = product_repo
        self.cart = cart
        self._prompter = prompter
        self._echo = echo

    # --- Actions --------------------------------------------------------------

    def add_product(self) -> bool:
        handler = AddProductHandler(self.product_repo)
        try:
            title = handler.check_title(self._prompter.ask("Titill:"))
            description = handler.check_description(self._prompter.ask("Lýsing:"))
            price = self._prompter.ask("Verð:")
            product = handler.handle(title, description, price)
        except DomainException as exc:
            return self._fail(exc)

        self._echo(f"Vöru bætt við:\n{format_product(product)}")
        return True

    def show_products(self) -> bool:
        entries = ListProductsHandler(self.product_repo).handle()
        for entry in entries:
            self._echo(entry.text)
        return True

    def add_to_cart(self) -> bool:
        handler = AddToCartHandler(self.product_repo, self.cart)
        try:
            product = handler.lookup(self._prompter.ask("Sláðu inn auðkenni vöru:"))
            quantity = self._prompter.ask("Sláðu inn fjölda vöru:")
            handler.handle(product.id, quantity)
        except DomainException as exc:
            return self._fail(exc)
        return True

    def show_cart(self) -> bool:
        self._echo(ShowCartHandler(self.cart).handle().text)
        return True

    def checkout(self) -> bool:
        handler = CheckoutHandler(self.cart)
        try:
            handler.ensure_not_empty()
            name = self._prompter.ask("Sláðu inn nafn:")
            address = self._prompter.ask("Sláðu inn heimilisfang:")
            receipt = handler.handle(name, address)
        except DomainException as exc:
            return self._fail(exc)

        self._echo(receipt.text)
        return True

    # --- Internal helpers -----------------------------------------------------

    def _fail(self, exc: DomainException) -> bool:
        self._echo(str(exc), err=True)
        return False
