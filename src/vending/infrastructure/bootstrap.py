"""Composition root — wires configuration to a ready-to-use machine.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from pathlib import Path

from vending.domain.service.vending_machine import VendingMachine
from vending.infrastructure.config import build_machine, load_machine_config

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_CONFIG = Path(__file__).resolve().parents[3] / "data" / "machine.json"


def vending_machine(config_path: Path | None = None) -> VendingMachine:
    return build_machine(load_machine_config(config_path or DEFAULT_CONFIG))
