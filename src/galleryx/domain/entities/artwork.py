"""Entity representing a single consigned artwork."""

import logging
from datetime import datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import ClassVar

from galleryx.domain import errors
from galleryx.domain.utils import ensure_aware, text_overflow, utcnow
from galleryx.domain.value_objects import ArtworkState, ArtworkType

# pylint: disable=too-many-arguments,too-many-positional-arguments

logger = logging.getLogger(__name__)

PriceLike = Decimal | int | float | str

_IN = ArtworkState.IN_GALLERY
_AWAITING = ArtworkState.AWAITING_GALLERY_ENTRY
_SOLD = ArtworkState.SOLD
_RETURNED = ArtworkState.RETURNED_TO_ARTIST

# target state -> {source state: refusal reason, or None when the move is allowed}
TRANSITIONS: dict[ArtworkState, dict[ArtworkState, str | None]] = {
    _IN: {
        _IN: "is already in the Gallery.",
        _AWAITING: None,
        _SOLD: "has already been sold to a customer.",
        _RETURNED: None,
    },
    _SOLD: {
        _IN: None,
        _AWAITING: "has not been in the Gallery to sell.",
        _SOLD: "is already sold.",
        _RETURNED: None,
    },
    _RETURNED: {
        _IN: None,
        _AWAITING: None,
        _SOLD: "has been sold to a customer already.",
        _RETURNED: "is already returned to the Artist.",
    },
    _AWAITING: {
        _IN: None,
        _AWAITING: "is already awaiting Gallery entry.",
        _SOLD: "has been sold to a customer already.",
        _RETURNED: None,
    },
}


def _to_decimal(value: PriceLike) -> Decimal:
    try:
        price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise errors.BadPriceError(value, f"Price: {value!r}, is not a number.") from e
    if not price.is_finite():
        raise errors.BadPriceError(value, f"Price: {value}, is not a finite number.")
    return price


class Artwork:
    """A piece of artwork consigned to the gallery by an artist.

    The artwork's id is not stored here: it is the key under which the owning
    artist holds it. `artist_id` is a non-owning link back to that artist.
    """

    MAX_DESCRIPTION_CHARS: ClassVar[int] = 140
    MIN_PRICE: ClassVar[Decimal] = Decimal(0)
    MAX_PRICE: ClassVar[Decimal] = Decimal(1_000_000)
    MAX_DISPLAY_DATE_DAYS_AHEAD: ClassVar[int] = 3650
    MAX_DISPLAY_DAYS: ClassVar[int] = 14
    """Days an artwork may stay with the artist after its last display."""

    def __init__(
        self,
        description: str,
        price: PriceLike,
        display_date: datetime | None = None,
        artwork_type: ArtworkType = ArtworkType.PAINTING,
        state: ArtworkState = ArtworkState.AWAITING_GALLERY_ENTRY,
    ) -> None:
        """Create a new artwork.

        Args:
            description: Short description, at most 140 characters once trimmed.
            price: Asking price, greater than 0 and at most 1,000,000.
            display_date: Date the artwork went on display. Only recorded when
                `state` is IN_GALLERY; defaults to now in that case.
            artwork_type: Painting or sculpture.
            state: Initial lifecycle state.

        Raises:
            BadDescriptionError: If the description is blank or too long.
            BadPriceError: If the price is out of bounds.
            BadDateError: If the display date is too far in the future.
        """
        self._description = ""
        self._price = Decimal(0)
        self._display_dates: list[datetime] = []
        self.artwork_type = artwork_type
        self._state = state
        self.artist_id: int | None = None

        if not self.update_description(description):
            raise errors.BadDescriptionError("Description is blank.")
        self.update_price(price)

        if display_date is not None and not self.date_within_range(display_date):
            raise self._bad_date(display_date)
        if state is ArtworkState.IN_GALLERY:
            self._display_dates.append(
                ensure_aware(display_date) if display_date else utcnow()
            )

    # --- Construction Paths ---

    @classmethod
    def restore(
        cls,
        description: str,
        price: PriceLike,
        display_dates: list[datetime],
        artwork_type: ArtworkType,
        state: ArtworkState,
    ) -> "Artwork":
        """Rebuild a previously persisted artwork.

        Display dates are history and are not checked against the date range;
        description and price are validated as usual.
        """
        artwork = cls(description, price, None, artwork_type, ArtworkState.SOLD)
        artwork._state = state
        artwork._display_dates = [ensure_aware(d) for d in display_dates]
        return artwork

    # --- Properties ---

    @property
    def description(self) -> str:
        """The artwork's description."""
        return self._description

    @property
    def price(self) -> Decimal:
        """The artwork's asking price."""
        return self._price

    @property
    def state(self) -> ArtworkState:
        """Current lifecycle state."""
        return self._state

    @property
    def display_dates(self) -> tuple[datetime, ...]:
        """Every date the artwork was placed in the gallery, oldest first."""
        return tuple(self._display_dates)

    @property
    def most_recent_display_date(self) -> datetime | None:
        """Date of the current or most recent placement, None if never displayed."""
        return self._display_dates[-1] if self._display_dates else None

    # --- Field Updates ---

    def update_description(self, description: str) -> bool:
        """Replace the description.

        Returns:
            False (and leaves the description unchanged) if the trimmed text is blank.

        Raises:
            BadDescriptionError: If the trimmed text exceeds 140 characters.
        """
        description = description.strip()
        if not description:
            return False
        if overflow := text_overflow(description, self.MAX_DESCRIPTION_CHARS):
            raise errors.BadDescriptionError(
                f"Description length is too long by {overflow} characters.", overflow
            )
        self._description = description
        return True

    def update_price(self, price: PriceLike) -> bool:
        """Replace the price.

        Raises:
            BadPriceError: If the price is not a finite number, is not above 0
                or is above 1,000,000.
        """
        value = _to_decimal(price)
        if value <= self.MIN_PRICE:
            raise errors.BadPriceError(value, f"Price: {value}, is below {self.MIN_PRICE}.")
        if value > self.MAX_PRICE:
            raise errors.BadPriceError(
                value, f"Price: {value}, is too high. Above {self.MAX_PRICE}."
            )
        self._price = value
        return True

    def date_within_range(self, date: datetime, now: datetime | None = None) -> bool:
        """Check that a display date is at most 3650 days after now.

        There is no lower bound: back-dated displays are accepted.
        """
        now = ensure_aware(now) if now else utcnow()
        limit = now + timedelta(days=self.MAX_DISPLAY_DATE_DAYS_AHEAD)
        return ensure_aware(date) <= limit

    # --- State Transitions ---

    def check_transition(self, target: ArtworkState) -> None:
        """Raise `BadStateTransitionError` if the artwork cannot move to `target`."""
        if reason := TRANSITIONS[target][self._state]:
            logger.info(
                "Refused %s -> %s for artwork %r", self._state.value, target.value,
                self._description,
            )
            raise errors.BadStateTransitionError(
                self._description, self._state.value, target.value, reason
            )

    def add_to_gallery(self, date: datetime) -> None:
        """Put the artwork on display, recording `date` as its newest display date.

        Raises:
            BadStateTransitionError: If the artwork is already displayed or sold.
            BadDateError: If `date` is too far in the future.
        """
        self.check_transition(ArtworkState.IN_GALLERY)
        if not self.date_within_range(date):
            raise self._bad_date(date)
        self._display_dates.append(ensure_aware(date))
        self._set_state(ArtworkState.IN_GALLERY)

    def sell(self) -> None:
        """Mark the artwork as sold.

        Raises:
            BadStateTransitionError: If the artwork is sold or was never displayed.
        """
        self.check_transition(ArtworkState.SOLD)
        self._set_state(ArtworkState.SOLD)

    def return_to_artist(self) -> None:
        """Hand the artwork back to its artist.

        Raises:
            BadStateTransitionError: If the artwork is already returned or sold.
        """
        self.check_transition(ArtworkState.RETURNED_TO_ARTIST)
        self._set_state(ArtworkState.RETURNED_TO_ARTIST)

    def send_to_waiting_list(self) -> None:
        """Queue the artwork for gallery entry.

        Raises:
            BadStateTransitionError: If the artwork is already waiting or sold.
        """
        self.check_transition(ArtworkState.AWAITING_GALLERY_ENTRY)
        self._set_state(ArtworkState.AWAITING_GALLERY_ENTRY)

    def transition(self, target: ArtworkState, date: datetime | None = None) -> None:
        """Dispatch to the transition method that leads to `target`."""
        match target:
            case ArtworkState.IN_GALLERY:
                self.add_to_gallery(date or utcnow())
            case ArtworkState.SOLD:
                self.sell()
            case ArtworkState.RETURNED_TO_ARTIST:
                self.return_to_artist()
            case ArtworkState.AWAITING_GALLERY_ENTRY:
                self.send_to_waiting_list()

    # --- Display Window ---

    def gallery_time_expired(self, now: datetime) -> bool:
        """True if the artwork was returned and its display window has lapsed."""
        overdue = self.time_since_expired(now)
        return overdue is not None and overdue > 0

    def time_since_expired(self, now: datetime) -> float | None:
        """Days elapsed past the display window of a returned artwork.

        Returns:
            Negative while still within the window, None if the artwork is not
            returned to its artist or was never displayed.
        """
        last = self.most_recent_display_date
        if self._state is not ArtworkState.RETURNED_TO_ARTIST or last is None:
            return None
        elapsed = ensure_aware(now) - last
        return elapsed / timedelta(days=1) - self.MAX_DISPLAY_DAYS

    # --- Content Equality ---

    def content_key(self) -> tuple[str, Decimal, ArtworkType, ArtworkState]:
        """The fields two artworks must share to be considered duplicates."""
        return (self._description, self._price, self.artwork_type, self._state)

    def same_content(self, other: "Artwork") -> bool:
        """True if `other` is a duplicate of this artwork (ids are ignored)."""
        return self.content_key() == other.content_key()

    # --- Internal Helpers ---

    def _set_state(self, state: ArtworkState) -> None:
        logger.debug(
            "Artwork %r: %s -> %s", self._description, self._state.value, state.value
        )
        self._state = state

    def _bad_date(self, date: datetime) -> errors.BadDateError:
        return errors.BadDateError(
            f"DateTime: {date.isoformat()} is too far in the future. Exceeds max days "
            f"of: {self.MAX_DISPLAY_DATE_DAYS_AHEAD}."
        )

    def __str__(self) -> str:
        shown = ""
        if self._state is ArtworkState.IN_GALLERY and self.most_recent_display_date:
            shown = f", Display Date: {self.most_recent_display_date:%Y-%m-%d %H:%M}"
        return (
            f"Description: {self._description}, Price: £{self._price}{shown}, "
            f"Artwork type: {self.artwork_type.value}, Artwork state: {self._state.value}"
        )

    def __repr__(self) -> str:
        return (
            f"Artwork(description={self._description!r}, price={self._price!r}, "
            f"state={self._state.value!r})"
        )
