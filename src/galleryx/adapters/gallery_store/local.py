"""Local filesystem-based XML gallery store adapter."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from galleryx.interfaces.gallery_store import (
    GalleryLoadError,
    GallerySaveError,
    GalleryStore,
)

from .xml_document import decode_gallery, encode_gallery

if TYPE_CHECKING:
    from galleryx.domain.aggregates import Gallery

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike[str]


class XmlFileGalleryStore(GalleryStore):
    """GalleryStore that keeps the XML document in a single local file."""

    def __init__(self, path: PathLike) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the XML document."""
        return self._path

    def save(self, gallery: Gallery) -> None:
        data = encode_gallery(gallery)
        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # write beside the target, then atomically swap it in
            with tempfile.NamedTemporaryFile(
                dir=self._path.parent, prefix=f".{self._path.name}.", delete=False
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise GallerySaveError(f"{self._path}: {e.strerror or e}") from e
        logger.info("Saved gallery to %s (%d bytes)", self._path, len(data))

    def load(self) -> Gallery:
        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise GalleryLoadError(f"{self._path}: {e.strerror or e}") from e
        gallery = decode_gallery(data)
        logger.info("Loaded gallery from %s: %s", self._path, gallery)
        return gallery

    def exists(self) -> bool:
        return self._path.is_file()
