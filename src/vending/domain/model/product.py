"""Product value object and its stocked counterpart.

A Product is what the customer buys; a StockedProduct is a Product sitting
in a slot together with the number of units left in that slot.
"""

from __future__ import annotations

from dataclasses import dataclass

from vending.domain.exceptions import OutOfStockError, ValidationError
from vending.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """An item for sale. Two products with the same name and price are equal."""

    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name cannot be blank")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
        if self.price.is_zero():
            raise ValidationError("Product price must be greater than zero")

    @staticmethod
    def of(name: str, price) -> Product:
        return Product(name, Money.of(price))


@dataclass
class StockedProduct:
    """A product and its remaining units.

    Invariant: ``units`` is never negative.
    """

    product: Product
    units: int

    def __post_init__(self) -> None:
        if (
            isinstance(self.units, bool)
            or not isinstance(self.units, int)
            or self.units < 0
        ):
            raise ValidationError(
                f"Units for {self.product.name} must be a non-negative integer"
            )

    @property
    def in_stock(self) -> bool:
        return self.units > 0

    def decrement(self) -> None:
        """Take one unit out of the slot."""
        if not self.in_stock:
            raise OutOfStockError()
        self.units -= 1
