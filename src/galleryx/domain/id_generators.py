"""Identifier issuance for the Gallery aggregate."""

import abc
import threading

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for an integer ID generator.

    Every id returned by `new_id` must be strictly greater than every id
    returned before it, and ids are never reused.
    """

    @abc.abstractmethod
    def new_id(self) -> int:
        """Issue a new identifier."""

    @abc.abstractmethod
    def peek(self) -> int:
        """Return the id the next call to `new_id` will issue, without issuing it."""


class SequentialIdGenerator(IdGenerator):
    """Thread-safe counter issuing ``start, start + 1, ...``.

    The counter value is what gets persisted (`peek`), so a restored generator
    continues exactly where the saved one stopped.
    """

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._next = start

    def new_id(self) -> int:
        """Issue the next id (serialized across threads)."""
        with self._lock:
            issued = self._next
            self._next += 1
            return issued

    def peek(self) -> int:
        return self._next
