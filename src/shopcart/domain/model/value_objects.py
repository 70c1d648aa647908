"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import InvalidQuantityError, ValidationError
from shopcart.domain.formatting import format_price
from shopcart.domain.validation import is_integer_in_range, parse_int

MIN_QUANTITY = 1
MAX_QUANTITY = 99


@dataclass(frozen=True)
class Money:
    """Whole-krónur amount.

    Prices in the shop are always integers, so the amount is kept as an
    ``int`` and arithmetic never rounds.
    """

    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_price(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)


@dataclass(frozen=True)
class Quantity:
    """A requested quantity of a product.

    Enforces the invariant that a single request adds between 1 and 99
    units, inclusive.
    """

    value: int

    def __post_init__(self) -> None:
        if not is_integer_in_range(self.value, MIN_QUANTITY, MAX_QUANTITY):
            raise InvalidQuantityError()
        # 5.0 is accepted as 5; store it as an int
        object.__setattr__(self, "value", int(self.value))

    @staticmethod
    def parse(raw: str | int | None) -> Quantity:
        value = parse_int(raw) if raw is not None else None
        if value is None:
            raise InvalidQuantityError()
        return Quantity(value)
