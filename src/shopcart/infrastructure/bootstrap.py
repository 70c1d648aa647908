"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from typing import Callable

import click

from shopcart.domain.model.cart import Cart
from shopcart.infrastructure.cli.prompter import ClickPrompter, Prompter
from shopcart.infrastructure.cli.session import ShopSession
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.persistence.in_memory_product_repository import (
    DEFAULT_PRODUCTS,
    InMemoryProductRepository,
)


def product_repository(settings: Settings) -> InMemoryProductRepository:
    products = list(DEFAULT_PRODUCTS) if settings.seed_catalog else []
    return InMemoryProductRepository(products)


def shop_session(
    settings: Settings,
    prompter: Prompter | None = None,
    echo: Callable[..., None] = click.echo,
) -> ShopSession:
    return ShopSession(
        product_repo=product_repository(settings),
        cart=Cart(),
        prompter=prompter or ClickPrompter(),
        echo=echo,
    )
