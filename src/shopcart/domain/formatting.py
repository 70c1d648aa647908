"""Text rendering for prices, products, carts and receipts.

All output follows the Icelandic convention: digits are grouped in threes
with a period and amounts carry the ``kr.`` suffix.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shopcart.domain.model.cart import Cart
    from shopcart.domain.model.product import Product

CURRENCY_SUFFIX = "kr."
EMPTY_CART_TEXT = "Karfan er tóm."


def format_price(amount: int | float | Decimal) -> str:
    """Format *amount* as whole krónur, e.g. ``123000 -> "123.000 kr."``."""
    exact = Decimal(amount) if isinstance(amount, int) else Decimal(str(amount))
    _, digits, exponent = exact.as_tuple()
    with localcontext() as ctx:
        # Room for every integer digit so large amounts never overflow
        ctx.prec = max(ctx.prec, len(digits) + max(exponent, 0) + 1)
        whole = exact.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    grouped = f"{whole:,}".replace(",", ".")
    return f"{grouped} {CURRENCY_SUFFIX}"


def format_product(product: Product, quantity: int | None = None) -> str:
    """Describe a product on one line, optionally with quantity and total."""
    text = f"{product.title} — {product.price}"
    if quantity is not None:
        total = product.price * quantity
        text += f" — {quantity}x{product.price} samtals {total}"
    return text


def format_catalog_entry(index: int, product: Product) -> str:
    return f"#{index} {product.title} — {product.description} — {product.price}"


def format_cart(cart: Cart) -> str:
    """Render every cart line followed by the grand total.

    Lines with a single unit show only the unit price; the rest show
    ``<qty>x<unit> samtals <line total>``.
    """
    if cart.is_empty:
        return EMPTY_CART_TEXT

    rows = []
    for line in cart.lines:
        if line.quantity == 1:
            rows.append(f"{line.product.title} — {line.product.price}")
        else:
            rows.append(
                f"{line.product.title} — {line.quantity}x{line.product.price} "
                f"samtals {line.line_total}"
            )
    rows.append(f"Samtals: {cart.total}")
    return "\n".join(rows)


def format_receipt(name: str, address: str, cart: Cart) -> str:
    return (
        f"Pöntun móttekin {name}.\n"
        f"Vörur verða sendar á {address}.\n"
        f"\n"
        f"{format_cart(cart)}"
    )
