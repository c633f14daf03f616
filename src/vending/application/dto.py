"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoinLineDTO:
    """A denomination and a number of coins, e.g. change or coin stock."""

    denomination: str  # formatted, e.g. "0.25"
    count: int


@dataclass(frozen=True)
class PurchaseDTO:
    """Output: the outcome of one purchase attempt."""

    product_name: str | None
    price: str | None
    change: list[CoinLineDTO]
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ProductLineDTO:
    slot: int
    product_name: str
    price: str
    units: int


@dataclass(frozen=True)
class StockDTO:
    """Output: everything the machine holds."""

    products: list[ProductLineDTO]
    coins: list[CoinLineDTO]
    coin_total: str
    inserted_amount: str
