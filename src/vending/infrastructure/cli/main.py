import logging

import click

from vending.infrastructure.cli.machine_commands import machine_buy, machine_stock


@click.group()
@click.option("--verbose", is_flag=True, help="Log machine activity to stderr.")
def cli(verbose: bool) -> None:
    """Vending machine"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(machine_stock)
cli.add_command(machine_buy)
