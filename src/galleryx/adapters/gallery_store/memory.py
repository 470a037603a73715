"""In-memory gallery store.

Keeps the encoded XML document in RAM, so every save/load still goes through
the real codec. Meant for tests, examples and local experiments; nothing
survives the process.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from galleryx.interfaces.gallery_store import GalleryLoadError, GalleryStore

from .xml_document import decode_gallery, encode_gallery

if TYPE_CHECKING:
    from galleryx.domain.aggregates import Gallery

__all__ = ["InMemoryGalleryStore"]


class InMemoryGalleryStore(GalleryStore):
    """GalleryStore backed by a bytes buffer."""

    def __init__(self, data: bytes | None = None) -> None:
        self._lock = threading.Lock()
        self._data = data

    @property
    def data(self) -> bytes | None:
        """The last saved document, if any."""
        return self._data

    def save(self, gallery: Gallery) -> None:
        data = encode_gallery(gallery)
        with self._lock:
            self._data = data

    def load(self) -> Gallery:
        with self._lock:
            data = self._data
        if data is None:
            raise GalleryLoadError("nothing has been saved")
        return decode_gallery(data)

    def exists(self) -> bool:
        return self._data is not None
