"""``galleryx gallery`` commands."""

from __future__ import annotations

import click
import click_extra as clickx

from galleryx.domain.aggregates import Gallery

from .helpers import open_gallery


@click.group(cls=clickx.ExtraGroup)
def gallery() -> None:
    """Whole-gallery views."""


@gallery.command()
def summary() -> None:
    """Show counts, display occupancy and the next ids to be issued."""
    with open_gallery(commit=False) as held:
        artworks = sum(len(a.stock) for a in held.artists.values())
        orders = sum(len(c.orders) for c in held.customers.values())
        click.echo(str(held))
        click.echo(f"Artworks : {artworks}")
        click.echo(f"On show  : {held.artworks_in_gallery}/{Gallery.GALLERY_CAPACITY}")
        click.echo(f"Orders   : {orders}")
        click.echo(
            "Next ids : "
            f"artist={held.artist_id_count} artwork={held.artwork_id_count} "
            f"customer={held.customer_id_count} order={held.order_id_count}"
        )
