"""Machine configuration: initial products and coins loaded from JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from vending.domain.model.coin_stock import CoinStock
from vending.domain.model.product import Product, StockedProduct
from vending.domain.model.product_stock import ProductStock
from vending.domain.service.vending_machine import VendingMachine

logger = logging.getLogger(__name__)


@dataclass
class ProductConfig:
    name: str
    price: str
    units: int


@dataclass
class MachineConfig:
    products: list[ProductConfig]
    coins: dict[str, int]


def _load_json(path: Path) -> dict:
    if not path.exists():
        raise ValueError(f"Missing config file: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc


def _require_keys(data: dict, keys: set[str], context: str) -> None:
    _require_type(data, dict, context)
    missing = keys - set(data.keys())
    if missing:
        raise ValueError(f"{context}: missing keys {sorted(missing)}")


def _require_type(value: object, expected: type | tuple[type, ...], context: str) -> None:
    # bool is an int subclass but never a valid count or price.
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValueError(f"{context}: unexpected {type(value).__name__} {value!r}")


def _require_count(value: object, context: str) -> int:
    _require_type(value, int, context)
    if value < 0:
        raise ValueError(f"{context}: must be non-negative, got {value}")
    return value


def load_machine_config(path: Path) -> MachineConfig:
    raw = _load_json(path)
    _require_keys(raw, {"products", "coins"}, path.name)
    _require_type(raw["products"], list, f"{path.name} products")
    _require_type(raw["coins"], dict, f"{path.name} coins")

    products: list[ProductConfig] = []
    for index, product in enumerate(raw["products"]):
        context = f"product #{index}"
        _require_keys(product, {"name", "price", "units"}, context)
        _require_type(product["name"], str, f"{context} name")
        _require_type(product["price"], (str, int, float), f"{context} price")
        products.append(
            ProductConfig(
                name=product["name"],
                price=str(product["price"]),
                units=_require_count(product["units"], f"{context} units"),
            )
        )

    coins = {
        denomination: _require_count(count, f"coin {denomination}")
        for denomination, count in raw["coins"].items()
    }

    logger.info("Loaded %d products and %d denominations from %s", len(products), len(coins), path)
    return MachineConfig(products=products, coins=coins)


def build_machine(config: MachineConfig) -> VendingMachine:
    """Construct a freshly stocked machine from a config."""
    product_stock = ProductStock(
        [StockedProduct(Product.of(p.name, p.price), p.units) for p in config.products]
    )
    coin_stock = CoinStock(config.coins)
    return VendingMachine(product_stock=product_stock, coin_stock=coin_stock)
