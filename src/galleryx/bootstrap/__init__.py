"""Bootstrap package for GALLERYX.

Wires the configured gallery store and unit of work together.
"""

from .bootstrap import AppContainer, bootstrap, build_store, build_uow

__all__ = ["AppContainer", "bootstrap", "build_store", "build_uow"]
