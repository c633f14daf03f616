"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from vending.application.dto import CoinLineDTO, ProductLineDTO, StockDTO
from vending.domain.service.vending_machine import VendingMachine


class ShowStockHandler:

    def __init__(self, machine: VendingMachine) -> None:
        self._machine = machine

    def handle(self) -> StockDTO:
        products = [
            ProductLineDTO(
                slot=slot,
                product_name=item.product.name,
                price=str(item.product.price),
                units=item.units,
            )
            for slot, item in self._machine.product_stock
        ]
        coins = [
            CoinLineDTO(denomination=f"{denomination:.2f}", count=count)
            for denomination, count in self._machine.coins_in_stock().items()
        ]
        return StockDTO(
            products=products,
            coins=coins,
            coin_total=f"{self._machine.coins_value():.2f}",
            inserted_amount=f"{self._machine.inserted_amount:.2f}",
        )
