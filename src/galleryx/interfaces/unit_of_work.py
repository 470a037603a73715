"""Unit of Work interface for GALLERYX.

Defines the AbstractUnitOfWork contract: a context-managed unit of work that
exposes the Gallery aggregate and abstract commit/rollback methods.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from galleryx.domain.aggregates import Gallery


class AbstractUnitOfWork(abc.ABC):
    """Contract for a unit of work over the gallery."""

    gallery: Gallery

    def __enter__(self) -> AbstractUnitOfWork:
        """Enter the unit of work context and return the unit.

        Implementations acquire the gallery here.
        """
        return self

    def __exit__(self, *args):
        """Exit the unit of work context.

        Default behavior is to roll back on exit.
        """
        self.rollback()

    @abc.abstractmethod
    def commit(self):
        """Persist changes made to the gallery."""

    @abc.abstractmethod
    def rollback(self):
        """Discard changes that have not been committed."""
