"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from shopcart.application.list_products import ListProductsHandler
from shopcart.domain.formatting import format_price
from shopcart.infrastructure.bootstrap import product_repository
from shopcart.infrastructure.config import Settings


@click.command("products")
@click.pass_obj
def products(settings: Settings) -> None:
    """List all products in the catalog."""
    entries = ListProductsHandler(product_repository(settings)).handle()

    if not entries:
        click.echo("Engar vörur í boði.")
        return

    for entry in entries:
        click.echo(entry.text)


@click.command("price")
@click.argument("amount", type=click.IntRange(min=0))
def price(amount: int) -> None:
    """Format AMOUNT as Icelandic krónur."""
    click.echo(format_price(amount))
