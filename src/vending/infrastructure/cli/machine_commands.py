"""CLI commands for operating the vending machine."""

from __future__ import annotations

from pathlib import Path

import click

from vending.application.purchase import PurchaseHandler
from vending.application.show_stock import ShowStockHandler
from vending.domain.exceptions import DomainException
from vending.domain.service.vending_machine import VendingMachine
from vending.infrastructure.bootstrap import vending_machine

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Machine config JSON (defaults to data/machine.json).",
)


def _load(config_path: Path | None) -> VendingMachine:
    try:
        return vending_machine(config_path)
    except (DomainException, ValueError) as exc:
        raise click.ClickException(str(exc))


@click.command("stock")
@_config_option
def machine_stock(config_path: Path | None) -> None:
    """Show products and coins in the machine."""
    stock = ShowStockHandler(_load(config_path)).handle()

    click.echo(f"{'Slot':>4}  {'Product':<20} {'Price':>8} {'Units':>6}")
    click.echo("-" * 42)
    for line in stock.products:
        click.echo(
            f"{line.slot:>4}  {line.product_name:<20} {line.price:>8} {line.units:>6}"
        )
    click.echo()
    click.echo(f"{'Coin':>8} {'Count':>6}")
    click.echo("-" * 15)
    for coin in stock.coins:
        click.echo(f"{coin.denomination:>8} {coin.count:>6}")
    click.echo("-" * 15)
    click.echo(f"{'Total':>8} {stock.coin_total:>6}")


@click.command("buy")
@click.option("--slot", required=True, type=int, help="Product slot, starting at 0.")
@click.option(
    "--coin", "coins", multiple=True, required=True,
    help="Coin value to insert, e.g. 2.00. Repeat for several coins.",
)
@_config_option
def machine_buy(slot: int, coins: tuple[str, ...], config_path: Path | None) -> None:
    """Insert coins and buy the product in SLOT."""
    handler = PurchaseHandler(_load(config_path))

    try:
        dto = handler.handle(slot=slot, coins=list(coins))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.succeeded:
        raise click.ClickException(dto.error)

    click.echo(f"Dispensed: {dto.product_name} ({dto.price})")
    if not dto.change:
        click.echo("No change.")
        return
    click.echo("Change:")
    for coin in dto.change:
        click.echo(f"  {coin.denomination:>6} x {coin.count}")
