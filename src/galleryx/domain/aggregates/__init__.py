"""Aggregates package.

The Gallery is the single aggregate root; it is re-exported here to provide a
convenient import path.
"""

from .gallery import Gallery

__all__ = ["Gallery"]
