"""Domain service: the vending machine.

Coordinates the product stock, the coin stock and the inserted-money
ledger. Selecting a product is validate-then-mutate:

  Phase 1 — look up the slot, check units, check funds and work out the
            change. Any failure is returned as an error result.
  Phase 2 — decrement the product, pay out the change, clear the ledger.

Nothing in phase 2 can fail once phase 1 passed, so no rollback is needed.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from vending.domain.exceptions import (
    DomainException,
    InsufficientFundsError,
    InvalidDenominationError,
    OutOfStockError,
)
from vending.domain.model.coin_stock import CoinStock
from vending.domain.model.product_stock import ProductStock
from vending.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class VendingMachine:

    def __init__(self, product_stock: ProductStock, coin_stock: CoinStock) -> None:
        self._product_stock = product_stock
        self._coin_stock = coin_stock
        self._inserted = Money.zero()

    @property
    def inserted_amount(self) -> Decimal:
        return self._inserted.amount

    @property
    def product_stock(self) -> ProductStock:
        return self._product_stock

    def insert_coins(self, *coins) -> None:
        """Accept coins one by one.

        Stops at the first coin that is not accepted and raises
        InvalidDenominationError; coins before it stay inserted.
        """
        for value in coins:
            try:
                coin = self._coin_stock.deposit(value)
            except InvalidDenominationError:
                logger.warning("Rejected coin %r", value)
                raise
            self._inserted += coin
            logger.debug("Accepted coin %s, inserted amount %s", coin, self._inserted)

    def select_product(self, slot: int) -> dict:
        """Sell the product in ``slot`` against the inserted amount.

        Returns ``{"product": p}`` for exact payment,
        ``{"product": p, "change": {Decimal: count}}`` when change is due,
        or ``{"error": message}`` when the sale cannot go through.
        """
        # Phase 1: validate and compute every effect
        try:
            product = self._product_stock.product_at(slot)
            if self._product_stock.units_at(slot) == 0:
                raise OutOfStockError()
            if self._inserted < product.price:
                raise InsufficientFundsError(product.price, self._inserted)
            due = self._inserted - product.price
            breakdown = self._coin_stock.make_change(due)
        except DomainException as exc:
            logger.info("Selection of slot %r refused: %s", slot, exc)
            return {"error": str(exc)}

        # Phase 2: commit
        self._product_stock.decrement(slot)
        self._coin_stock.commit_change(breakdown)
        self._inserted = Money.zero()

        logger.info(
            "Sold %s from slot %d for %s, change %s",
            product.name, slot, product.price, due,
        )
        if due.is_zero():
            return {"product": product}
        return {"product": product, "change": _to_decimal_keys(breakdown)}

    def units_in_stock(self, slot: int) -> int:
        return self._product_stock.units_at(slot)

    def coins_in_stock(self) -> dict[Decimal, int]:
        return _to_decimal_keys(self._coin_stock.total_counts())

    def coins_value(self) -> Decimal:
        """Total value of every coin the machine holds."""
        return self._coin_stock.total_value().amount


def _to_decimal_keys(counts: dict[Money, int]) -> dict[Decimal, int]:
    return {denomination.amount: count for denomination, count in counts.items()}
