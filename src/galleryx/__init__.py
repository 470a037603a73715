"""GALLERYX

Inventory management for a consignment art gallery: artists and the artworks
they consign, customers and the orders they place. The core keeps the whole
gallery in memory, enforces the business rules, and persists it as a single
XML document.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
