"""Gallery store interface definitions.

A gallery store persists the whole Gallery aggregate as one document and loads
it back. There is no partial or streamed persistence.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from galleryx.domain.aggregates import Gallery


class GalleryStoreError(Exception):
    """Base class for persistence failures."""


class GalleryLoadError(GalleryStoreError):
    """Raised when a stored gallery cannot be read or decoded.

    The message carries the underlying cause. No partially built gallery is
    ever returned alongside this error.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Gallery load failed: {reason}")
        self.reason = reason


class GallerySaveError(GalleryStoreError):
    """Raised when a gallery cannot be written."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Gallery save failed: {reason}")
        self.reason = reason


class GalleryStore(abc.ABC):
    """Abstract base class for whole-gallery persistence."""

    @abc.abstractmethod
    def save(self, gallery: Gallery) -> None:
        """Write the entire gallery, replacing any previously saved one.

        Raises:
            GallerySaveError: If the document cannot be written.
        """

    @abc.abstractmethod
    def load(self) -> Gallery:
        """Read the saved gallery back.

        Returns:
            A gallery with identical ids, counters and entity content.

        Raises:
            GalleryLoadError: If nothing was saved, or the document is unreadable,
                malformed or inconsistent.
        """

    @abc.abstractmethod
    def exists(self) -> bool:
        """Check whether a saved gallery is available to load."""
