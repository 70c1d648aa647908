"""Integration tests for the Checkout and ShowCart use cases."""

import pytest

from shopcart.application.checkout import CheckoutHandler
from shopcart.application.show_cart import ShowCartHandler
from shopcart.domain.exceptions import EmptyCartError, MissingBuyerInfoError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity

HAT = Product(id=1, title="HTML húfa", description="Húfa", price=Money(5000))
SOCKS = Product(id=2, title="CSS sokkar", description="Sokkar", price=Money(3000))


def _filled_cart() -> Cart:
    cart = Cart()
    cart.add(HAT, Quantity(1))
    cart.add(SOCKS, Quantity(2))
    return cart


class TestCheckout:

    def test_empty_cart_rejected(self):
        with pytest.raises(EmptyCartError, match="^Karfan er tóm.$"):
            CheckoutHandler(Cart()).handle("Jón", "Laugavegur 1")

    def test_empty_cart_checked_before_buyer_info(self):
        with pytest.raises(EmptyCartError):
            CheckoutHandler(Cart()).handle("", "")

    @pytest.mark.parametrize(
        "name, address",
        [("", "Laugavegur 1"), ("Jón", ""), (None, "Laugavegur 1"), ("Jón", "  ")],
    )
    def test_missing_buyer_info_rejected(self, name, address):
        cart = _filled_cart()
        with pytest.raises(
            MissingBuyerInfoError, match="^Nafn og heimilisfang eru nauðsynleg gögn.$"
        ):
            CheckoutHandler(cart).handle(name, address)
        assert cart.name is None

    def test_receipt(self):
        cart = _filled_cart()
        receipt = CheckoutHandler(cart).handle("Jón", "Laugavegur 1")
        assert receipt.text == (
            "Pöntun móttekin Jón.\n"
            "Vörur verða sendar á Laugavegur 1.\n"
            "\n"
            "HTML húfa — 5.000 kr.\n"
            "CSS sokkar — 2x3.000 kr. samtals 6.000 kr.\n"
            "Samtals: 11.000 kr."
        )
        assert receipt.cart.total == "11.000 kr."

    def test_buyer_recorded_and_cart_kept(self):
        cart = _filled_cart()
        CheckoutHandler(cart).handle(" Jón ", "Laugavegur 1")
        assert cart.name == "Jón"
        assert cart.address == "Laugavegur 1"
        assert len(cart.lines) == 2


class TestShowCart:

    def test_empty(self):
        dto = ShowCartHandler(Cart()).handle()
        assert dto.lines == []
        assert dto.text == "Karfan er tóm."
        assert dto.total == "0 kr."

    def test_lines(self):
        dto = ShowCartHandler(_filled_cart()).handle()
        assert [(line.title, line.quantity, line.line_total) for line in dto.lines] == [
            ("HTML húfa", 1, "5.000 kr."),
            ("CSS sokkar", 2, "6.000 kr."),
        ]
        assert dto.text.endswith("Samtals: 11.000 kr.")
