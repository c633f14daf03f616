"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the machine can turn them into error results and the CLI layer can catch
them uniformly. Messages are user-facing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vending.domain.model.value_objects import Money


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidSlotError(EntityNotFoundError):
    """No product slot exists at the requested index."""

    def __init__(self, slot: object) -> None:
        super().__init__("The selected product does not exist.")
        self.slot = slot


class OutOfStockError(ValidationError):
    """The slot exists but has no units left."""

    def __init__(self) -> None:
        super().__init__("The selected product is out of stock.")


class InsufficientFundsError(ValidationError):
    """Less money was inserted than the product costs."""

    def __init__(self, price: Money, inserted: Money) -> None:
        self.price = price
        self.inserted = inserted
        super().__init__(
            f"Not enough money. Price: {price}; Inserted Amount: {inserted}; "
            f"Need {price - inserted} more."
        )


class InsufficientChangeError(ValidationError):
    """The coin stock cannot pay out the exact change."""

    def __init__(self) -> None:
        super().__init__("Cannot return a change, not enough required coins.")


class InvalidDenominationError(ValidationError):
    """A coin value is not one the machine accepts."""


class NegativeResultError(ValidationError):
    """An arithmetic operation would produce a negative amount."""
