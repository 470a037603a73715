"""Module including value objects used across the domain layer."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")

NOT_FOUND_ID = -1


class ArtworkType(Enum):
    """Enumeration of possible artwork types"""

    PAINTING = "Painting"
    SCULPTURE = "Sculpture"


class ArtworkState(Enum):
    """Enumeration of artwork lifecycle states.

    The values double as the persisted text of each state.
    """

    IN_GALLERY = "InGallery"
    AWAITING_GALLERY_ENTRY = "AwaitingGalleryEntry"
    SOLD = "Sold"
    RETURNED_TO_ARTIST = "ReturnedToArtist"


class DuplicateScope(Enum):
    """Where the gallery looks for content-equal artworks before adding one."""

    GALLERY = "gallery"
    ARTIST = "artist"


@dataclass(frozen=True, slots=True)
class Lookup(Generic[T]):
    """Result of a lookup: an ``(id, value)`` pair.

    A miss is the sentinel ``Lookup(-1, None)`` rather than an exception, so
    callers must check `found` before using `value`.
    """

    id: int
    value: T | None

    @classmethod
    def missing(cls) -> "Lookup[T]":
        """Return the not-found sentinel."""
        return cls(NOT_FOUND_ID, None)

    @property
    def found(self) -> bool:
        """True when the lookup produced a value."""
        return self.value is not None

    def __iter__(self) -> Iterator[object]:
        yield self.id
        yield self.value
