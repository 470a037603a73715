"""Fixtures for gallery_store contract tests."""

from collections.abc import Iterable

import pytest

from galleryx.adapters.gallery_store import InMemoryGalleryStore, XmlFileGalleryStore
from galleryx.interfaces.gallery_store import GalleryStore


@pytest.fixture(params=["memory", "xml-file"])
def gallery_store(request: pytest.FixtureRequest, tmp_path) -> Iterable[GalleryStore]:
    """Return a fresh, empty GalleryStore for the requested backend.

    Supported params:
      - `"memory"`   → InMemoryGalleryStore
      - `"xml-file"` → XmlFileGalleryStore under pytest's tmp_path

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "memory":
            yield InMemoryGalleryStore()
        case "xml-file":
            yield XmlFileGalleryStore(tmp_path / "gallery" / "GalleryX.xml")
        case _:
            raise ValueError(f"unknown gallery store type: {request.param}")
