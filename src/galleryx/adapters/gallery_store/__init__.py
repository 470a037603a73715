"""Gallery store adapters."""

from .local import XmlFileGalleryStore
from .memory import InMemoryGalleryStore
from .xml_document import decode_gallery, encode_gallery

__all__ = [
    "InMemoryGalleryStore",
    "XmlFileGalleryStore",
    "decode_gallery",
    "encode_gallery",
]
