"""Unit tests for the Cart aggregate and its merge rules."""

import pytest

from shopcart.domain.model.cart import Cart, CartLine
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


def _make_product(product_id: int = 1, price: int = 3000) -> Product:
    """Helper to build a catalog product."""
    return Product(
        id=product_id,
        title=f"Vara {product_id}",
        description="Lýsing",
        price=Money(price),
    )


class TestCartAdd:

    def test_new_product_appends_line(self):
        cart = Cart()
        line = cart.add(_make_product(), Quantity(2))
        assert cart.lines == [line]
        assert line.quantity == 2

    def test_same_product_merges_into_one_line(self):
        cart = Cart()
        product = _make_product(price=3000)
        cart.add(product, Quantity(2))
        cart.add(product, Quantity(3))
        assert len(cart.lines) == 1
        assert cart.lines[0].quantity == 5
        assert cart.total == Money(5 * 3000)

    def test_merge_matches_by_product_id(self):
        cart = Cart()
        cart.add(_make_product(1), Quantity(1))
        cart.add(_make_product(1), Quantity(1))
        assert len(cart.lines) == 1

    def test_merged_quantity_may_exceed_99(self):
        cart = Cart()
        product = _make_product()
        cart.add(product, Quantity(99))
        cart.add(product, Quantity(5))
        assert cart.lines[0].quantity == 104

    def test_line_holds_reference_not_copy(self):
        cart = Cart()
        product = _make_product()
        cart.add(product, Quantity(1))
        assert cart.lines[0].product is product


class TestCartTotal:

    def test_empty_cart_total_is_zero(self):
        assert Cart().total == Money(0)
        assert Cart().is_empty

    def test_total_matches_sum_after_every_add(self):
        cart = Cart()
        products = [_make_product(1, 5000), _make_product(2, 3000), _make_product(3, 20000)]
        for product, qty in [(products[0], 1), (products[1], 4), (products[0], 2), (products[2], 99)]:
            cart.add(product, Quantity(qty))
            expected = sum(line.product.price.amount * line.quantity for line in cart.lines)
            assert cart.total.amount == expected

    def test_item_count(self):
        cart = Cart()
        cart.add(_make_product(1), Quantity(2))
        cart.add(_make_product(2), Quantity(3))
        assert cart.item_count == 5


class TestCartLine:

    @pytest.mark.parametrize("qty, expected", [(1, 3000), (3, 9000)])
    def test_line_total(self, qty, expected):
        line = CartLine(product=_make_product(price=3000), quantity=qty)
        assert line.line_total == Money(expected)


class TestCartBuyer:

    def test_buyer_starts_absent(self):
        cart = Cart()
        assert cart.name is None
        assert cart.address is None

    def test_set_buyer(self):
        cart = Cart()
        cart.set_buyer("Jón", "Laugavegur 1")
        assert (cart.name, cart.address) == ("Jón", "Laugavegur 1")
