"""ProductStock — the machine's slots, in insertion order."""

from __future__ import annotations

from collections.abc import Iterator

from vending.domain.exceptions import InvalidSlotError
from vending.domain.model.product import Product, StockedProduct


class ProductStock:
    """Slots indexed from 0 in the order they were supplied.

    No restocking is exposed; units only ever go down through ``decrement``.
    """

    def __init__(self, items: list[StockedProduct]) -> None:
        self._items = list(items)

    def __iter__(self) -> Iterator[tuple[int, StockedProduct]]:
        return iter(enumerate(self._items))

    def product_at(self, slot: int) -> Product:
        return self._slot(slot).product

    def units_at(self, slot: int) -> int:
        return self._slot(slot).units

    def decrement(self, slot: int) -> None:
        self._slot(slot).decrement()

    def _slot(self, slot: int) -> StockedProduct:
        # Negative indices would silently wrap around on a list.
        if not isinstance(slot, int) or isinstance(slot, bool):
            raise InvalidSlotError(slot)
        if not 0 <= slot < len(self._items):
            raise InvalidSlotError(slot)
        return self._items[slot]
