"""Entity representing a gallery customer."""

import logging
from typing import ClassVar

from galleryx.domain import errors
from galleryx.domain.utils import text_overflow
from galleryx.domain.value_objects import Lookup

from .order import Order

logger = logging.getLogger(__name__)


class Customer:
    """A customer who places orders for artworks.

    The customer owns its orders, keyed by order id. Order ids are issued by
    the gallery.
    """

    MAX_NAME_CHARS: ClassVar[int] = 20

    def __init__(self, name: str) -> None:
        self._name = ""
        self.orders: dict[int, Order] = {}
        if not self.update_name(name):
            raise errors.BadNameError("Name is blank.")

    @property
    def name(self) -> str:
        """The customer's name."""
        return self._name

    def update_name(self, name: str) -> bool:
        """Replace the name; blank names are ignored (returns False).

        Raises:
            BadNameError: If the trimmed name exceeds 20 characters.
        """
        name = name.strip()
        if not name:
            return False
        if overflow := text_overflow(name, self.MAX_NAME_CHARS):
            raise errors.BadNameError(
                f"Name length is too long by {overflow} characters.", overflow
            )
        self._name = name
        return True

    def add_order(self, order_id: int, order: Order) -> None:
        """Record `order` under the gallery-issued `order_id`."""
        self.orders[order_id] = order
        logger.debug("Customer %r placed order %d", self._name, order_id)

    def find_order(self, order_id: int) -> Lookup[Order]:
        """Look up one of this customer's orders by id."""
        if (order := self.orders.get(order_id)) is None:
            return Lookup.missing()
        return Lookup(order_id, order)

    def find_order_by_artwork_id(self, artwork_id: int) -> Lookup[Order]:
        """First of this customer's orders for the given artwork."""
        for order_id, order in self.orders.items():
            if order.artwork_id == artwork_id:
                return Lookup(order_id, order)
        return Lookup.missing()

    def check_duplicates(self, order: Order) -> bool:
        """True if this customer already has an order with the same content."""
        return any(held.same_content(order) for held in self.orders.values())

    def same_content(self, other: "Customer") -> bool:
        """True if `other` has the same name (orders and ids are ignored)."""
        return self._name == other.name

    def __str__(self) -> str:
        return f"Name: {self._name}, Number of Orders: {len(self.orders)}"

    def __repr__(self) -> str:
        return f"Customer(name={self._name!r})"
