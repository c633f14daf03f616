"""CoinStock — the coins the machine holds, per denomination.

Change is worked out in two steps: ``make_change`` proposes a breakdown
without touching the counts, and ``commit_change`` pays it out. The
vending machine calls them back to back once every other check has
passed, so a purchase that cannot be completed never changes the stock.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from vending.domain.exceptions import (
    InsufficientChangeError,
    InvalidDenominationError,
    ValidationError,
)
from vending.domain.model.value_objects import Money

STANDARD_DENOMINATIONS: frozenset[Money] = frozenset(
    Money.of(value) for value in ("0.25", "0.50", "1.00", "2.00", "5.00")
)


class CoinStock:
    """Coin counts for a fixed set of accepted denominations.

    Invariants:
    - counts are never negative
    - no denomination outside the accepted set ever appears
    """

    def __init__(
        self,
        counts: Mapping | None = None,
        denominations: Iterable = STANDARD_DENOMINATIONS,
    ) -> None:
        accepted = sorted(Money.of(d) for d in denominations)
        if not accepted or accepted[0].is_zero():
            raise ValidationError("Denominations must be non-empty and above zero")
        self._counts: dict[Money, int] = {d: 0 for d in accepted}

        for raw, count in (counts or {}).items():
            denomination = self._accepted(raw)
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValidationError(
                    f"Coin count for {denomination} must be a non-negative integer"
                )
            self._counts[denomination] = count

    def deposit(self, denomination) -> Money:
        """Add one coin to the stock and return it as Money."""
        coin = self._accepted(denomination)
        self._counts[coin] += 1
        return coin

    def total_counts(self) -> dict[Money, int]:
        return dict(self._counts)

    def total_value(self) -> Money:
        return sum(
            (d * count for d, count in self._counts.items()), Money.zero()
        )

    def make_change(self, amount: Money) -> dict[Money, int]:
        """Propose coins adding up to exactly ``amount``.

        Greedy by largest denomination: take as many of the biggest coin as
        stock and the remainder allow, then move down. Correct for the
        standard denomination set. Does not mutate the stock.

        Raises InsufficientChangeError if the remainder cannot reach zero.
        """
        breakdown: dict[Money, int] = {}
        remaining = amount.cents

        for denomination in sorted(self._counts, reverse=True):
            if remaining == 0:
                break
            take = min(self._counts[denomination], remaining // denomination.cents)
            if take:
                breakdown[denomination] = take
                remaining -= take * denomination.cents

        if remaining:
            raise InsufficientChangeError()
        return breakdown

    def commit_change(self, breakdown: Mapping[Money, int]) -> None:
        """Pay out a breakdown returned by ``make_change``.

        The whole breakdown is checked before any count is touched.
        """
        # Phase 1: validate
        payout: list[tuple[Money, int]] = []
        for raw, count in breakdown.items():
            denomination = self._accepted(raw)
            if count < 0 or count > self._counts[denomination]:
                raise InsufficientChangeError()
            payout.append((denomination, count))

        # Phase 2: mutate
        for denomination, count in payout:
            self._counts[denomination] -= count

    def _accepted(self, value) -> Money:
        try:
            coin = Money.of(value)
        except ValidationError as exc:
            raise InvalidDenominationError(f"Invalid coin: {value!r}") from exc
        if coin not in self._counts:
            raise InvalidDenominationError(f"Coin {coin} is not accepted")
        return coin
