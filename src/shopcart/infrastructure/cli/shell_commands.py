"""The interactive shop shell."""

from __future__ import annotations

import click

from shopcart.infrastructure.bootstrap import shop_session
from shopcart.infrastructure.cli.session import ShopSession
from shopcart.infrastructure.config import Settings

MENU = (
    ("1", "Bæta vöru við", ShopSession.add_product),
    ("2", "Sýna vörur", ShopSession.show_products),
    ("3", "Bæta vöru í körfu", ShopSession.add_to_cart),
    ("4", "Sýna körfu", ShopSession.show_cart),
    ("5", "Klára kaup", ShopSession.checkout),
)
QUIT = "0"


def _show_menu() -> None:
    click.echo()
    for key, label, _ in MENU:
        click.echo(f"  {key}. {label}")
    click.echo(f"  {QUIT}. Hætta")


@click.command("shell")
@click.pass_obj
def shell(settings: Settings) -> None:
    """Run the interactive shop until the user quits."""
    session = shop_session(settings)
    actions = {key: action for key, _, action in MENU}

    while True:
        _show_menu()
        choice = click.prompt("Val", default=QUIT, show_default=False).strip()
        if choice == QUIT:
            break
        action = actions.get(choice)
        if action is None:
            click.echo(f"Óþekkt val: {choice}", err=True)
            continue
        action(session)
