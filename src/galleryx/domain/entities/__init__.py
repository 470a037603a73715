"""Entities package.

Entities owned by the Gallery aggregate. They are re-exported here to provide a
single, convenient import path.
"""

from .artist import Artist
from .artwork import Artwork
from .customer import Customer
from .order import Order

__all__ = ["Artist", "Artwork", "Customer", "Order"]
