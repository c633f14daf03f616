"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from vending.domain.exceptions import NegativeResultError, ValidationError

_CENT = Decimal("0.01")


@dataclass(frozen=True, order=True)
class Money:
    """Monetary amount held as an integer number of cents.

    Integer minor units keep sums of coin denominations exact; the
    ``amount`` property converts back to a two-place Decimal for callers.
    """

    cents: int

    def __post_init__(self) -> None:
        if not isinstance(self.cents, int) or isinstance(self.cents, bool):
            raise ValidationError(
                f"Money cents must be an int, got {type(self.cents).__name__}"
            )
        if self.cents < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.cents} cents"
            )

    @property
    def amount(self) -> Decimal:
        return Decimal(self.cents).scaleb(-2)

    def is_zero(self) -> bool:
        return self.cents == 0

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    def __sub__(self, other: Money) -> Money:
        result = self.cents - other.cents
        if result < 0:
            raise NegativeResultError(
                f"Cannot subtract {other} from {self}: result would be negative"
            )
        return Money(result)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.cents * factor)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f}"

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(0)

    @staticmethod
    def of(amount: str | float | int | Decimal | Money) -> Money:
        """Coerce a decimal-like value to Money.

        Floats go through ``str`` first so ``0.1`` means ten cents rather
        than its binary approximation. Fractions of a cent are rejected.
        """
        if isinstance(amount, Money):
            return amount
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            value = Decimal(str(amount))
            if not value.is_finite():
                raise ValidationError(f"Invalid money amount: {amount!r}")
            # Quantizing needs more digits than the context allows for huge values.
            quantized = value.quantize(_CENT)
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        if quantized != value:
            raise ValidationError(f"Money amount has fractional cents: {amount!r}")
        return Money(int(value * 100))
