"""Cart aggregate — the buyer's in-progress selection.

The Cart owns its lines. All merge rules are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    """A product in the cart together with how many units were picked.

    ``quantity`` is a plain int rather than a ``Quantity``: each request is
    capped at 99, but repeated requests accumulate without a cap.
    """

    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """Aggregate root for the shopper's cart.

    Invariants:
    - at most one line per product id
    - ``total`` is always the sum of the line totals
    """

    lines: list[CartLine] = field(default_factory=list)
    name: str | None = None
    address: str | None = None

    def add(self, product: Product, quantity: Quantity) -> CartLine:
        """Add *quantity* units of *product*, merging into an existing line."""
        line = self.find_line(product.id)
        if line is not None:
            line.quantity += quantity.value
            return line

        line = CartLine(product=product, quantity=quantity.value)
        self.lines.append(line)
        return line

    def find_line(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product.id == product_id:
                return line
        return None

    def set_buyer(self, name: str, address: str) -> None:
        self.name = name
        self.address = address

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)
