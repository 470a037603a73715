"""Entity representing a customer's order for an artwork."""

from datetime import datetime

from galleryx.domain.utils import ensure_aware


class Order:
    """An order for an artwork, placed by a customer.

    The order references the artwork by id only. `customer_id` is a non-owning
    link back to the customer that holds the order.
    """

    def __init__(self, artwork_id: int, order_date: datetime) -> None:
        self.artwork_id = artwork_id
        self.order_date = ensure_aware(order_date)
        self.customer_id: int | None = None

    def same_content(self, other: "Order") -> bool:
        """True if both orders are for the same artwork at the same date."""
        return (self.artwork_id, self.order_date) == (other.artwork_id, other.order_date)

    def __str__(self) -> str:
        return (
            f"ID of Artwork: {self.artwork_id}, "
            f"Date of Order: {self.order_date:%Y-%m-%d %H:%M}"
        )

    def __repr__(self) -> str:
        return f"Order(artwork_id={self.artwork_id!r}, order_date={self.order_date!r})"
