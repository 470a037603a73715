"""Store-backed Unit of Work for GALLERYX.

Loads the gallery from a GalleryStore when the context is entered and writes it
back on commit. Leaving the context without committing discards the changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from galleryx.domain.aggregates import Gallery
from galleryx.domain.value_objects import DuplicateScope
from galleryx.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from galleryx.interfaces.gallery_store import GalleryStore

logger = logging.getLogger(__name__)


class GalleryUnitOfWork(AbstractUnitOfWork):
    """Unit of work over a GalleryStore.

    Args:
        store: Where the gallery is loaded from and committed to.
        duplicate_scope: Duplicate-artwork policy applied to the loaded gallery.
    """

    def __init__(
        self, store: GalleryStore, duplicate_scope: DuplicateScope = DuplicateScope.GALLERY
    ) -> None:
        self.store = store
        self.duplicate_scope = duplicate_scope
        self.committed = False

    def __enter__(self):
        if self.store.exists():
            self.gallery = Gallery.load(self.store)
            self.gallery.duplicate_scope = self.duplicate_scope
        else:
            logger.info("No saved gallery found; starting a new one")
            self.gallery = Gallery(self.duplicate_scope)
        self.committed = False
        return super().__enter__()

    def commit(self):
        self.gallery.save(self.store)
        self.committed = True

    def rollback(self):
        if not self.committed:
            logger.debug("Discarding uncommitted gallery changes")
