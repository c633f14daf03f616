"""Tests for loading a machine from JSON config."""

import json
from decimal import Decimal

import pytest

from vending.domain.exceptions import InvalidDenominationError
from vending.infrastructure.bootstrap import DEFAULT_CONFIG, vending_machine
from vending.infrastructure.config import build_machine, load_machine_config


def _write(tmp_path, payload) -> object:
    path = tmp_path / "machine.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_default_config_ships_with_project():
    assert DEFAULT_CONFIG.exists()
    vm = vending_machine()
    assert vm.units_in_stock(0) == 5
    assert vm.coins_in_stock()[Decimal("5.00")] == 10


def test_load_and_build(tmp_path):
    path = _write(
        tmp_path,
        {
            "products": [{"name": "Water", "price": 1.5, "units": 3}],
            "coins": {"0.50": 4, "1.00": 2},
        },
    )
    config = load_machine_config(path)
    assert config.products[0].price == "1.5"
    assert config.coins == {"0.50": 4, "1.00": 2}

    vm = build_machine(config)
    vm.insert_coins(2.00)
    result = vm.select_product(0)
    assert result["product"].name == "Water"
    assert result["change"] == {Decimal("0.50"): 1}


def test_missing_file(tmp_path):
    with pytest.raises(ValueError, match="Missing config file"):
        load_machine_config(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "machine.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_machine_config(path)


def test_missing_top_level_keys(tmp_path):
    path = _write(tmp_path, {"products": []})
    with pytest.raises(ValueError, match=r"missing keys \['coins'\]"):
        load_machine_config(path)


def test_missing_product_keys(tmp_path):
    path = _write(tmp_path, {"products": [{"name": "Water"}], "coins": {}})
    with pytest.raises(ValueError, match="product #0: missing keys"):
        load_machine_config(path)


def test_negative_coin_count(tmp_path):
    path = _write(tmp_path, {"products": [], "coins": {"0.25": -2}})
    with pytest.raises(ValueError, match="non-negative"):
        load_machine_config(path)


def test_unaccepted_coin_fails_on_build(tmp_path):
    path = _write(tmp_path, {"products": [], "coins": {"0.01": 100}})
    with pytest.raises(InvalidDenominationError):
        build_machine(load_machine_config(path))


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"products": [], "coins": [1, 2]}, "coins: unexpected list"),
        ({"products": {"name": "Water"}, "coins": {}}, "products: unexpected dict"),
        ({"products": ["Water"], "coins": {}}, "product #0: unexpected str"),
    ],
)
def test_wrong_container_types(tmp_path, payload, message):
    path = _write(tmp_path, payload)
    with pytest.raises(ValueError, match=message):
        load_machine_config(path)


@pytest.mark.parametrize("units", [2.9, "3", True, None])
def test_units_must_be_an_integer(tmp_path, units):
    path = _write(
        tmp_path,
        {"products": [{"name": "W", "price": "1.00", "units": units}], "coins": {}},
    )
    with pytest.raises(ValueError, match="product #0 units: unexpected"):
        load_machine_config(path)


@pytest.mark.parametrize("count", [1.5, "10", False])
def test_coin_count_must_be_an_integer(tmp_path, count):
    path = _write(tmp_path, {"products": [], "coins": {"0.25": count}})
    with pytest.raises(ValueError, match="coin 0.25: unexpected"):
        load_machine_config(path)


def test_product_name_must_be_a_string(tmp_path):
    path = _write(
        tmp_path, {"products": [{"name": 7, "price": "1.00", "units": 1}], "coins": {}},
    )
    with pytest.raises(ValueError, match="product #0 name: unexpected int"):
        load_machine_config(path)
