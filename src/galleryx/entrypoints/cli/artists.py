"""``galleryx artist`` commands."""

from __future__ import annotations

import click
import click_extra as clickx

from galleryx.domain.entities import Artist
from galleryx.domain.errors import ArtistNotFoundError

from .helpers import open_gallery, success, warn


@click.group(cls=clickx.ExtraGroup)
def artist() -> None:
    """Manage artists."""


@artist.command()
@click.argument("name")
def add(name: str) -> None:
    """Add an artist and print its id."""
    with open_gallery() as gallery:
        new = Artist(name)
        artist_id = gallery.add_artist(new)
    success(f"Added artist {artist_id} ({new.name}).")
    click.echo(artist_id)


@artist.command()
@click.argument("artist_id", type=int)
def show(artist_id: int) -> None:
    """Show an artist and their stock."""
    with open_gallery(commit=False) as gallery:
        if not (found := gallery.find_artist(artist_id)).found:
            raise ArtistNotFoundError(artist_id)
        click.echo(f"{artist_id}: {found.value}")
        for artwork_id, artwork in found.value.stock.items():
            click.echo(f"  {artwork_id}: {artwork}")


@artist.command()
@click.argument("pattern")
def search(pattern: str) -> None:
    """List artists whose name contains PATTERN (case-insensitive)."""
    with open_gallery(commit=False) as gallery:
        results = gallery.find_artists_by_name(pattern)
        for artist_id, found in results:
            click.echo(f"{artist_id}: {found}")
    if not results:
        warn(f"No artists match {pattern.strip()!r}.")


@artist.command()
@click.argument("artist_id", type=int)
@click.argument("name")
def rename(artist_id: int, name: str) -> None:
    """Change an artist's name. A blank NAME leaves it unchanged."""
    with open_gallery() as gallery:
        if not (found := gallery.find_artist(artist_id)).found:
            raise ArtistNotFoundError(artist_id)
        changed = found.value.update_name(name)
    if changed:
        success(f"Artist {artist_id} is now {found.value.name}.")
    else:
        warn("Name is blank; nothing changed.")


@artist.command()
def duplicates() -> None:
    """List artists that share their name with another artist."""
    with open_gallery(commit=False) as gallery:
        for dup in gallery.check_duplicate_artists():
            click.echo(f"{gallery.get_artist_id(dup)}: {dup}")
