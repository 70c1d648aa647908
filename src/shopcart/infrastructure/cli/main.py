from __future__ import annotations

import logging

import click

from shopcart.infrastructure.cli.product_commands import price, products
from shopcart.infrastructure.cli.shell_commands import shell
from shopcart.infrastructure.config import load_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override SHOPCART_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """shopcart — Vefverslun í skipanalínu"""
    settings = load_settings()
    logging.basicConfig(format=LOG_FORMAT, level=(log_level or settings.log_level).upper())
    ctx.obj = settings


# Register subcommands
cli.add_command(shell)
cli.add_command(products)
cli.add_command(price)
