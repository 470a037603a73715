"""``galleryx artwork`` commands.

Prices, dates and enum names are parsed here; the domain receives typed values.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import click
import click_extra as clickx

from galleryx.domain.entities import Artwork
from galleryx.domain.errors import ArtworkNotFoundError, BadDescriptionError
from galleryx.domain.utils import ensure_aware, utcnow
from galleryx.domain.value_objects import ArtworkState, ArtworkType

from .helpers import DECIMAL, DISPLAY_DATE, enum_choice, open_gallery, success, warn
from .helpers.param_types import to_enum


def _aware(date: datetime | None) -> datetime | None:
    return ensure_aware(date) if date else None


@click.group(cls=clickx.ExtraGroup)
def artwork() -> None:
    """Manage artworks and their lifecycle."""


@artwork.command()
@click.argument("artist_id", type=int)
@click.argument("description")
@click.argument("price", type=DECIMAL)
@click.option(
    "--type",
    "artwork_type",
    type=enum_choice(ArtworkType),
    default=ArtworkType.PAINTING.value,
    show_default=True,
)
@click.option(
    "--state",
    type=enum_choice(ArtworkState),
    default=ArtworkState.AWAITING_GALLERY_ENTRY.value,
    show_default=True,
    help="Initial state. Only InGallery records a display date.",
)
@click.option(
    "--display-date",
    type=DISPLAY_DATE,
    default=None,
    help="When the artwork went on display (UTC, default now).",
)
def add(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    artist_id: int,
    description: str,
    price: Decimal,
    artwork_type: str,
    state: str,
    display_date: datetime | None,
) -> None:
    """Consign an artwork to ARTIST_ID and print its id."""
    with open_gallery() as gallery:
        new = Artwork(
            description,
            price,
            _aware(display_date),
            to_enum(ArtworkType, artwork_type),
            to_enum(ArtworkState, state),
        )
        artwork_id = gallery.add_artwork(artist_id, new)
    success(f"Added artwork {artwork_id} ({new.description}) to artist {artist_id}.")
    click.echo(artwork_id)


@artwork.command()
@click.argument("artwork_id", type=int)
def show(artwork_id: int) -> None:
    """Show an artwork."""
    with open_gallery(commit=False) as gallery:
        if not (found := gallery.find_artwork(artwork_id)).found:
            raise ArtworkNotFoundError(artwork_id)
        click.echo(f"{artwork_id}: {found.value}")
        for display_date in found.value.display_dates:
            click.echo(f"  displayed {display_date:%Y-%m-%d %H:%M}")


@artwork.command()
@click.argument("pattern")
def search(pattern: str) -> None:
    """List artworks whose description contains PATTERN (case-insensitive)."""
    with open_gallery(commit=False) as gallery:
        results = gallery.find_artworks_by_description(pattern)
        for artwork_id, found in results:
            click.echo(f"{artwork_id}: {found}")
    if not results:
        warn(f"No artworks match {pattern.strip()!r}.")


@artwork.command("state")
@click.argument("artwork_id", type=int)
@click.argument("new_state", metavar="STATE", type=enum_choice(ArtworkState))
@click.option(
    "--date",
    type=DISPLAY_DATE,
    default=None,
    help="Display date recorded when moving to InGallery (UTC, default now).",
)
def change_state(artwork_id: int, new_state: str, date: datetime | None) -> None:
    """Move an artwork to STATE."""
    target = to_enum(ArtworkState, new_state)
    with open_gallery() as gallery:
        gallery.change_artwork_state(artwork_id, target, _aware(date))
    success(f"Artwork {artwork_id} is now {target.value}.")


@artwork.command()
@click.argument("artwork_id", type=int)
@click.option("--description", default=None, help="New description.")
@click.option("--price", type=DECIMAL, default=None, help="New price.")
def update(artwork_id: int, description: str | None, price: Decimal | None) -> None:
    """Change an artwork's description and/or price."""
    if description is None and price is None:
        raise click.UsageError("Nothing to update: pass --description and/or --price.")
    with open_gallery() as gallery:
        if not (found := gallery.find_artwork(artwork_id)).found:
            raise ArtworkNotFoundError(artwork_id)
        target = found.value
        # a failure here skips the commit, so nothing partial is saved
        if description is not None and not target.update_description(description):
            raise BadDescriptionError("Description is blank.")
        if price is not None:
            target.update_price(price)
    success(f"Updated artwork {artwork_id}: {target}")


@artwork.command()
def expired() -> None:
    """List returned artworks whose display window has lapsed."""
    with open_gallery(commit=False) as gallery:
        now = utcnow()
        results = gallery.find_expired_artworks(now)
        for artwork_id, found in results:
            days = found.time_since_expired(now)
            click.echo(f"{artwork_id}: {found} (overdue by {days:.1f} days)")
    if not results:
        warn("No expired artworks.")
