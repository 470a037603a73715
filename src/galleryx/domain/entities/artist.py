"""Entity representing an artist and the stock they consign."""

import logging
from typing import ClassVar

from galleryx.domain import errors
from galleryx.domain.utils import (
    contains_ignore_case,
    normalize_search_term,
    text_overflow,
)
from galleryx.domain.value_objects import NOT_FOUND_ID, ArtworkState, Lookup

from .artwork import Artwork

logger = logging.getLogger(__name__)


class Artist:
    """An artist who consigns artworks to the gallery.

    The artist owns its stock, keyed by artwork id. Ids are issued by the
    gallery; the artist only stores what it is given.
    """

    MAX_NAME_CHARS: ClassVar[int] = 20
    MAX_ARTWORKS_IN_GALLERY: ClassVar[int] = 5

    def __init__(self, name: str) -> None:
        """Create a new artist.

        Raises:
            BadNameError: If the name is blank or longer than 20 characters.
        """
        self._name = ""
        self.stock: dict[int, Artwork] = {}
        if not self.update_name(name):
            raise errors.BadNameError("Name is blank.")

    @property
    def name(self) -> str:
        """The artist's name."""
        return self._name

    @property
    def artworks_in_gallery_count(self) -> int:
        """Number of this artist's artworks currently on display."""
        return sum(1 for a in self.stock.values() if a.state is ArtworkState.IN_GALLERY)

    def update_name(self, name: str) -> bool:
        """Replace the name.

        Returns:
            False (and leaves the name unchanged) if the trimmed name is blank.

        Raises:
            BadNameError: If the trimmed name exceeds 20 characters.
        """
        name = name.strip()
        if not name:
            return False
        if overflow := text_overflow(name, self.MAX_NAME_CHARS):
            raise errors.BadNameError(
                f"Name length is too long by {overflow} characters.", overflow
            )
        self._name = name
        return True

    # --- Stock ---

    def check_quota(self, artwork: Artwork) -> None:
        """Raise if accepting `artwork` would put too many of this artist's works on display.

        Only artworks arriving already IN_GALLERY count against the quota.

        Raises:
            QuotaExceededError: If the artwork is on display and the artist
                already has 5 on display.
        """
        if (
            artwork.state is ArtworkState.IN_GALLERY
            and self.artworks_in_gallery_count >= self.MAX_ARTWORKS_IN_GALLERY
        ):
            raise errors.QuotaExceededError(self._name, self.MAX_ARTWORKS_IN_GALLERY)

    def add_artwork(self, artwork_id: int, artwork: Artwork) -> None:
        """Take `artwork` into stock under `artwork_id`.

        Raises:
            QuotaExceededError: See `check_quota`.
        """
        self.check_quota(artwork)
        self.stock[artwork_id] = artwork
        logger.debug("Artist %r took artwork %d into stock", self._name, artwork_id)

    def find_artwork(self, artwork_id: int) -> Lookup[Artwork]:
        """Look up an artwork in stock by id."""
        if (artwork := self.stock.get(artwork_id)) is None:
            return Lookup.missing()
        return Lookup(artwork_id, artwork)

    def find_artworks_by_description(self, pattern: str) -> list[Lookup[Artwork]]:
        """Case-insensitive substring search over the stock's descriptions.

        Raises:
            InvalidSearchTermError: If the trimmed pattern is empty or longer
                than a description may be.
        """
        term = normalize_search_term(pattern, Artwork.MAX_DESCRIPTION_CHARS)
        return [
            Lookup(artwork_id, artwork)
            for artwork_id, artwork in self.stock.items()
            if contains_ignore_case(artwork.description, term)
        ]

    def get_artwork_id(self, artwork: Artwork) -> int:
        """Reverse lookup of an artwork's id; -1 if it is not in this stock."""
        for artwork_id, held in self.stock.items():
            if held is artwork:
                return artwork_id
        return NOT_FOUND_ID

    def check_duplicates(self, artwork: Artwork) -> bool:
        """True if the stock already holds an artwork with the same content."""
        return any(held.same_content(artwork) for held in self.stock.values())

    def duplicate_artworks(self) -> list[Artwork]:
        """Artworks in stock that have at least one distinct content-equal sibling."""
        return [
            artwork
            for artwork in self.stock.values()
            if any(
                other is not artwork and other.same_content(artwork)
                for other in self.stock.values()
            )
        ]

    # --- Content Equality ---

    def same_content(self, other: "Artist") -> bool:
        """True if `other` has the same name (stock and ids are ignored)."""
        return self._name == other.name

    def __str__(self) -> str:
        return f"Name: {self._name}, Number of stock items: {len(self.stock)}"

    def __repr__(self) -> str:
        return f"Artist(name={self._name!r})"
