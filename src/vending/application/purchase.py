"""Application service: Purchase use case.

Inserts the customer's coins and selects a slot in one go, then
translates the machine's result into a PurchaseDTO.
"""

from __future__ import annotations

from vending.application.dto import CoinLineDTO, PurchaseDTO
from vending.domain.service.vending_machine import VendingMachine


class PurchaseHandler:

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def handle(self, slot: int, coins: list[str]) -> PurchaseDTO:
        """Run a purchase.

        Raises InvalidDenominationError if a coin is not accepted; every
        other failure comes back as ``PurchaseDTO.error``.
        """
        self._machine.insert_coins(*coins)
        result = self._machine.select_product(slot)

        if "error" in result:
            return PurchaseDTO(
                product_name=None, price=None, change=[], error=result["error"]
            )

        product = result["product"]
        change = sorted(result.get("change", {}).items(), reverse=True)
        return PurchaseDTO(
            product_name=product.name,
            price=str(product.price),
            change=[CoinLineDTO(f"{d:.2f}", count) for d, count in change],
        )
