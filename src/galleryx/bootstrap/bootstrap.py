"""Bootstrap the gallery unit of work from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from galleryx import config
from galleryx.adapters.gallery_store import XmlFileGalleryStore
from galleryx.adapters.unit_of_work import GalleryUnitOfWork
from galleryx.domain.value_objects import DuplicateScope
from galleryx.interfaces.gallery_store import GalleryStore
from galleryx.interfaces.unit_of_work import AbstractUnitOfWork


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    data_file: Path
    uow: AbstractUnitOfWork
    duplicate_scope: DuplicateScope = DuplicateScope.GALLERY


def build_store(path: Path) -> GalleryStore:
    """Build the XML file store for the gallery document at `path`."""
    return XmlFileGalleryStore(path)


def build_uow(
    store: GalleryStore, duplicate_scope: DuplicateScope = DuplicateScope.GALLERY
) -> AbstractUnitOfWork:
    """Build a new unit of work over `store`."""
    return GalleryUnitOfWork(store, duplicate_scope)


def bootstrap(data_file: Path | None = None) -> AppContainer:
    """Build the application container from the environment.

    Args:
        data_file: Overrides `GALLERYX_DATA_FILE` when given.

    Raises:
        InvalidConfigError: If `GALLERYX_DUPLICATE_SCOPE` is invalid.
    """
    path = data_file or config.get_data_file()
    scope = config.get_duplicate_scope()
    uow = build_uow(build_store(path), scope)
    return AppContainer(data_file=path, uow=uow, duplicate_scope=scope)
