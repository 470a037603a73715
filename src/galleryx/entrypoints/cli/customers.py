"""``galleryx customer`` commands."""

from __future__ import annotations

import click
import click_extra as clickx

from galleryx.domain.entities import Customer
from galleryx.domain.errors import CustomerNotFoundError

from .helpers import open_gallery, success, warn


@click.group(cls=clickx.ExtraGroup)
def customer() -> None:
    """Manage customers."""


@customer.command()
@click.argument("name")
def add(name: str) -> None:
    """Add a customer and print its id."""
    with open_gallery() as gallery:
        new = Customer(name)
        customer_id = gallery.add_customer(new)
    success(f"Added customer {customer_id} ({new.name}).")
    click.echo(customer_id)


@customer.command()
@click.argument("customer_id", type=int)
def show(customer_id: int) -> None:
    """Show a customer and their orders."""
    with open_gallery(commit=False) as gallery:
        if not (found := gallery.find_customer(customer_id)).found:
            raise CustomerNotFoundError(customer_id)
        click.echo(f"{customer_id}: {found.value}")
        for order_id, order in found.value.orders.items():
            click.echo(f"  {order_id}: {order}")


@customer.command()
@click.argument("pattern")
def search(pattern: str) -> None:
    """List customers whose name contains PATTERN (case-insensitive)."""
    with open_gallery(commit=False) as gallery:
        results = gallery.find_customers_by_name(pattern)
        for customer_id, found in results:
            click.echo(f"{customer_id}: {found}")
    if not results:
        warn(f"No customers match {pattern.strip()!r}.")


@customer.command()
def duplicates() -> None:
    """List customers that share their name with another customer."""
    with open_gallery(commit=False) as gallery:
        for dup in gallery.check_duplicate_customers():
            click.echo(f"{gallery.get_customer_id(dup)}: {dup}")
