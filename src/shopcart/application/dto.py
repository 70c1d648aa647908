"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.formatting import format_cart
from shopcart.domain.model.cart import Cart


@dataclass(frozen=True)
class CatalogEntryDTO:
    """Output: one product as listed in the catalog."""

    index: int  # 1-based display position
    id: int
    title: str
    description: str
    price: str  # formatted, e.g. "5.000 kr."
    text: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: int
    title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart, with its rendered summary."""

    lines: list[CartLineDTO]
    total: str
    text: str

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product.id,
                    title=line.product.title,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in cart.lines
            ],
            total=str(cart.total),
            text=format_cart(cart),
        )


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: the receipt produced at checkout."""

    name: str
    address: str
    cart: CartDTO
    text: str
