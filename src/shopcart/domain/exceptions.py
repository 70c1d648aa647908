"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass carries the fixed message shown to the shopper.
"""

TITLE_REQUIRED = "Titill má ekki vera tómur."
DESCRIPTION_REQUIRED = "Lýsing má ekki vera tóm."
PRICE_INVALID = "Verð verður að vera jákvæð heiltala."


class DomainException(Exception):
    """Base class for all domain errors."""

    default_message = "Villa kom upp."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidIdentifierError(ValidationError):
    """A product identifier is empty or not a positive integer."""

    default_message = (
        "Auðkenni vöru er ekki löglegt, verður að vera heiltala stærri en 0."
    )


class InvalidQuantityError(ValidationError):
    """A requested quantity lies outside [1, 99]."""

    default_message = "Fjöldi er ekki löglegur, lágmark 1 og hámark 99."


class MissingBuyerInfoError(ValidationError):
    """Checkout was attempted without a name or an address."""

    default_message = "Nafn og heimilisfang eru nauðsynleg gögn."


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    default_message = "Vara fannst ekki."


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""

    default_message = "Karfan er tóm."
