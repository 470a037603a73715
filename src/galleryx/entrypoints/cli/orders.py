"""``galleryx order`` commands."""

from __future__ import annotations

from datetime import datetime

import click
import click_extra as clickx

from galleryx.domain.entities import Order
from galleryx.domain.utils import ensure_aware, utcnow

from .helpers import DISPLAY_DATE, open_gallery, success, warn


@click.group(cls=clickx.ExtraGroup)
def order() -> None:
    """Record and find orders."""


@order.command()
@click.argument("customer_id", type=int)
@click.argument("artwork_id", type=int)
@click.option(
    "--date",
    "order_date",
    type=DISPLAY_DATE,
    default=None,
    help="When the order was placed (UTC, default now).",
)
def add(customer_id: int, artwork_id: int, order_date: datetime | None) -> None:
    """Record an order by CUSTOMER_ID for ARTWORK_ID and print its id."""
    with open_gallery() as gallery:
        new = Order(artwork_id, ensure_aware(order_date) if order_date else utcnow())
        order_id = gallery.add_order(customer_id, new)
    success(f"Added order {order_id} for artwork {artwork_id}.")
    click.echo(order_id)


@order.command()
@click.argument("artwork_id", type=int)
def find(artwork_id: int) -> None:
    """Show the order placed for ARTWORK_ID, if any."""
    with open_gallery(commit=False) as gallery:
        order_id, found = gallery.find_order_by_artwork_id(artwork_id)
        if found is not None:
            click.echo(f"{order_id}: {found} (customer {found.customer_id})")
    if found is None:
        warn(f"No order for artwork {artwork_id}.")
