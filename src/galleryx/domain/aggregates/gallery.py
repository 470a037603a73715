"""Gallery aggregate root.

The gallery owns every artist and customer (and through them every artwork and
order), issues all identifiers, and enforces the rules that span more than one
entity: gallery-wide display capacity, duplicate artworks and orders, and
artist quotas when an artwork is put back on display.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from galleryx.domain import errors
from galleryx.domain.entities import Artist, Artwork, Customer, Order
from galleryx.domain.id_generators import IdGenerator, SequentialIdGenerator
from galleryx.domain.utils import (
    contains_ignore_case,
    normalize_search_term,
    utcnow,
)
from galleryx.domain.value_objects import (
    NOT_FOUND_ID,
    ArtworkState,
    DuplicateScope,
    Lookup,
)

if TYPE_CHECKING:
    from galleryx.interfaces.gallery_store import GalleryStore

# pylint: disable=too-many-public-methods,too-many-instance-attributes

logger = logging.getLogger(__name__)


class Gallery:
    """Art gallery holding artists, their artworks, customers and their orders.

    All mutating operations are serialized behind a single re-entrant lock so
    that id issuance and capacity checks can never interleave. Every failing
    operation raises before anything is changed.
    """

    START_ID_NO: ClassVar[int] = 0
    GALLERY_CAPACITY: ClassVar[int] = 50

    def __init__(self, duplicate_scope: DuplicateScope = DuplicateScope.GALLERY) -> None:
        self.duplicate_scope = duplicate_scope
        self._artists: dict[int, Artist] = {}
        self._customers: dict[int, Customer] = {}
        self._artwork_ids: IdGenerator = SequentialIdGenerator(self.START_ID_NO)
        self._artist_ids: IdGenerator = SequentialIdGenerator(self.START_ID_NO)
        self._order_ids: IdGenerator = SequentialIdGenerator(self.START_ID_NO)
        self._customer_ids: IdGenerator = SequentialIdGenerator(self.START_ID_NO)
        self._lock = threading.RLock()

    # --- Construction Paths ---

    @classmethod
    def restore(  # pylint: disable=too-many-arguments
        cls,
        *,
        artists: Mapping[int, Artist],
        customers: Mapping[int, Customer],
        artwork_id_count: int,
        artist_id_count: int,
        order_id_count: int,
        customer_id_count: int,
        duplicate_scope: DuplicateScope = DuplicateScope.GALLERY,
    ) -> Gallery:
        """Rebuild a gallery with the given ids and counters, exactly as persisted.

        No business rule is re-run; the parent ids of every artwork and order
        are recomputed from where they sit.
        """
        gallery = cls(duplicate_scope)
        gallery._artists = dict(artists)
        gallery._customers = dict(customers)
        gallery._artwork_ids = SequentialIdGenerator(artwork_id_count)
        gallery._artist_ids = SequentialIdGenerator(artist_id_count)
        gallery._order_ids = SequentialIdGenerator(order_id_count)
        gallery._customer_ids = SequentialIdGenerator(customer_id_count)
        for artist_id, artist in gallery._artists.items():
            for artwork in artist.stock.values():
                artwork.artist_id = artist_id
        for customer_id, customer in gallery._customers.items():
            for order in customer.orders.values():
                order.customer_id = customer_id
        return gallery

    @classmethod
    def load(cls, store: GalleryStore) -> Gallery:
        """Load a gallery from `store`.

        Raises:
            GalleryLoadError: If the stored document cannot be read or decoded.
        """
        return store.load()

    def save(self, store: GalleryStore) -> None:
        """Persist the whole gallery to `store`.

        Raises:
            GallerySaveError: If the document cannot be written.
        """
        with self._lock:
            store.save(self)

    # --- Identifiers ---

    def new_artwork_id(self) -> int:
        """Issue a new artwork id."""
        return self._artwork_ids.new_id()

    def new_artist_id(self) -> int:
        """Issue a new artist id."""
        return self._artist_ids.new_id()

    def new_order_id(self) -> int:
        """Issue a new order id."""
        return self._order_ids.new_id()

    def new_customer_id(self) -> int:
        """Issue a new customer id."""
        return self._customer_ids.new_id()

    @property
    def artwork_id_count(self) -> int:
        """Next artwork id to be issued."""
        return self._artwork_ids.peek()

    @property
    def artist_id_count(self) -> int:
        """Next artist id to be issued."""
        return self._artist_ids.peek()

    @property
    def order_id_count(self) -> int:
        """Next order id to be issued."""
        return self._order_ids.peek()

    @property
    def customer_id_count(self) -> int:
        """Next customer id to be issued."""
        return self._customer_ids.peek()

    # --- Views ---

    @property
    def artists(self) -> Mapping[int, Artist]:
        """Read-only view of the artists, keyed by id."""
        return MappingProxyType(self._artists)

    @property
    def customers(self) -> Mapping[int, Customer]:
        """Read-only view of the customers, keyed by id."""
        return MappingProxyType(self._customers)

    @property
    def artworks_in_gallery(self) -> int:
        """Total number of artworks currently on display."""
        return sum(a.artworks_in_gallery_count for a in self._artists.values())

    def iter_artworks(self) -> Iterator[tuple[int, Artwork]]:
        """Yield ``(artwork_id, artwork)`` for every artwork of every artist."""
        for artist in self._artists.values():
            yield from artist.stock.items()

    # --- Artists ---

    def add_artist(self, artist: Artist) -> int:
        """Add `artist` under a freshly issued id and return that id."""
        with self._lock:
            artist_id = self.new_artist_id()
            self._artists[artist_id] = artist
        logger.info("Added artist %d (%s)", artist_id, artist.name)
        return artist_id

    def find_artist(self, artist_id: int) -> Lookup[Artist]:
        """Look up an artist by id; returns the not-found sentinel on a miss."""
        if (artist := self._artists.get(artist_id)) is None:
            return Lookup.missing()
        return Lookup(artist_id, artist)

    def find_artists_by_name(self, pattern: str) -> list[Lookup[Artist]]:
        """Case-insensitive substring search over artist names.

        Raises:
            InvalidSearchTermError: If the trimmed pattern is empty or longer
                than a name may be.
        """
        term = normalize_search_term(pattern, Artist.MAX_NAME_CHARS)
        return [
            Lookup(artist_id, artist)
            for artist_id, artist in self._artists.items()
            if contains_ignore_case(artist.name, term)
        ]

    def get_artist_id(self, artist: Artist) -> int:
        """Reverse lookup of an artist's id; -1 if the artist is not in the gallery."""
        for artist_id, held in self._artists.items():
            if held is artist:
                return artist_id
        return NOT_FOUND_ID

    def check_duplicate_artists(self) -> list[Artist]:
        """Artists sharing their name with at least one other artist."""
        return _duplicates(list(self._artists.values()))

    # --- Artworks ---

    def add_artwork(self, artist_id: int, artwork: Artwork) -> int:
        """Consign `artwork` to the artist with `artist_id`.

        Returns:
            The newly issued artwork id.

        Raises:
            ArtistNotFoundError: If there is no such artist.
            CapacityExceededError: If the artwork arrives on display and the
                gallery is already full.
            DuplicateArtworkError: If a content-equal artwork is already held
                (by any artist, or by the target artist only, per `duplicate_scope`).
            QuotaExceededError: If the artist already has 5 artworks on display.
        """
        with self._lock:
            if (artist := self._artists.get(artist_id)) is None:
                raise errors.ArtistNotFoundError(artist_id)
            if (
                artwork.state is ArtworkState.IN_GALLERY
                and self.artworks_in_gallery >= self.GALLERY_CAPACITY
            ):
                logger.info("Rejected artwork %r: gallery full", artwork.description)
                raise errors.CapacityExceededError(self.GALLERY_CAPACITY)
            if holder := self._find_duplicate_holder(artist, artwork):
                logger.info("Rejected artwork %r: duplicate", artwork.description)
                raise errors.DuplicateArtworkError(artwork.description, holder.name)
            artist.check_quota(artwork)

            artwork_id = self.new_artwork_id()
            artist.add_artwork(artwork_id, artwork)
            artwork.artist_id = artist_id
        logger.info(
            "Added artwork %d (%s) to artist %d", artwork_id, artwork.description, artist_id
        )
        return artwork_id

    def find_artwork(self, artwork_id: int) -> Lookup[Artwork]:
        """Look up an artwork by id across all artists."""
        for artist in self._artists.values():
            if (found := artist.find_artwork(artwork_id)).found:
                return found
        return Lookup.missing()

    def find_artworks_by_description(self, pattern: str) -> list[Lookup[Artwork]]:
        """Aggregate every artist's description search results.

        Validation is left to the per-artist search, whose errors propagate.
        """
        found: list[Lookup[Artwork]] = []
        for artist in self._artists.values():
            found.extend(artist.find_artworks_by_description(pattern))
        return found

    def change_artwork_state(
        self, artwork_id: int, new_state: ArtworkState, date: datetime | None = None
    ) -> None:
        """Move an artwork to `new_state`.

        Putting an artwork on display is checked against the gallery capacity,
        then the owning artist's quota, then the artwork's own lifecycle; it
        records `date` (default: now) as the newest display date. Other targets
        go straight to the artwork's transition.

        Raises:
            ArtworkNotFoundError: If there is no such artwork.
            CapacityExceededError: If the gallery is already full.
            ArtistQuotaExceededError: If the owning artist already has 5 on display.
            BadStateTransitionError: If the artwork cannot make the move.
        """
        with self._lock:
            if (artwork := self.find_artwork(artwork_id).value) is None:
                raise errors.ArtworkNotFoundError(artwork_id)
            if new_state is ArtworkState.IN_GALLERY:
                if self.artworks_in_gallery >= self.GALLERY_CAPACITY:
                    raise errors.CapacityExceededError(self.GALLERY_CAPACITY)
                owner = self._owner_of(artwork)
                if owner.artworks_in_gallery_count >= Artist.MAX_ARTWORKS_IN_GALLERY:
                    raise errors.ArtistQuotaExceededError(
                        owner.name, Artist.MAX_ARTWORKS_IN_GALLERY
                    )
                artwork.add_to_gallery(date or utcnow())
            else:
                artwork.transition(new_state)
        logger.info("Artwork %d is now %s", artwork_id, new_state.value)

    def find_expired_artworks(self, now: datetime | None = None) -> list[Lookup[Artwork]]:
        """Returned artworks whose display window has lapsed."""
        now = now or utcnow()
        return [
            Lookup(artwork_id, artwork)
            for artwork_id, artwork in self.iter_artworks()
            if artwork.gallery_time_expired(now)
        ]

    # --- Customers ---

    def add_customer(self, customer: Customer) -> int:
        """Add `customer` under a freshly issued id and return that id."""
        with self._lock:
            customer_id = self.new_customer_id()
            self._customers[customer_id] = customer
        logger.info("Added customer %d (%s)", customer_id, customer.name)
        return customer_id

    def find_customer(self, customer_id: int) -> Lookup[Customer]:
        """Look up a customer by id; returns the not-found sentinel on a miss."""
        if (customer := self._customers.get(customer_id)) is None:
            return Lookup.missing()
        return Lookup(customer_id, customer)

    def find_customers_by_name(self, pattern: str) -> list[Lookup[Customer]]:
        """Case-insensitive substring search over customer names.

        Raises:
            InvalidSearchTermError: If the trimmed pattern is empty or too long.
        """
        term = normalize_search_term(pattern, Customer.MAX_NAME_CHARS)
        return [
            Lookup(customer_id, customer)
            for customer_id, customer in self._customers.items()
            if contains_ignore_case(customer.name, term)
        ]

    def get_customer_id(self, customer: Customer) -> int:
        """Reverse lookup of a customer's id; -1 if not in the gallery."""
        for customer_id, held in self._customers.items():
            if held is customer:
                return customer_id
        return NOT_FOUND_ID

    def check_duplicate_customers(self) -> list[Customer]:
        """Customers sharing their name with at least one other customer."""
        return _duplicates(list(self._customers.values()))

    # --- Orders ---

    def add_order(self, customer_id: int, order: Order) -> int:
        """Record `order` for the customer with `customer_id`.

        Returns:
            The newly issued order id.

        Raises:
            CustomerNotFoundError: If there is no such customer.
            ArtworkNotFoundError: If the ordered artwork does not exist.
            DuplicateOrderError: If any customer already has an order for the
                same artwork at the same date.
        """
        with self._lock:
            if (customer := self._customers.get(customer_id)) is None:
                raise errors.CustomerNotFoundError(customer_id)
            if not self.find_artwork(order.artwork_id).found:
                raise errors.ArtworkNotFoundError(order.artwork_id)
            for holder in self._customers.values():
                if holder.check_duplicates(order):
                    logger.info("Rejected order for artwork %d: duplicate", order.artwork_id)
                    raise errors.DuplicateOrderError(order.artwork_id, holder.name)

            order_id = self.new_order_id()
            customer.add_order(order_id, order)
            order.customer_id = customer_id
        logger.info("Added order %d for artwork %d", order_id, order.artwork_id)
        return order_id

    def find_order_by_artwork_id(self, artwork_id: int) -> Lookup[Order]:
        """First order, across all customers, for the given artwork."""
        for customer in self._customers.values():
            if (found := customer.find_order_by_artwork_id(artwork_id)).found:
                return found
        return Lookup.missing()

    # --- Internal Helpers ---

    def _find_duplicate_holder(self, target: Artist, artwork: Artwork) -> Artist | None:
        candidates = (
            [target]
            if self.duplicate_scope is DuplicateScope.ARTIST
            else self._artists.values()
        )
        for artist in candidates:
            if artist.check_duplicates(artwork):
                return artist
        return None

    def _owner_of(self, artwork: Artwork) -> Artist:
        if artwork.artist_id is not None and artwork.artist_id in self._artists:
            return self._artists[artwork.artist_id]
        for artist in self._artists.values():
            if artist.get_artwork_id(artwork) != NOT_FOUND_ID:
                return artist
        raise errors.ArtworkNotFoundError(NOT_FOUND_ID)  # pragma: no cover

    def __str__(self) -> str:
        return f"No. of Artists: {len(self._artists)}, No. of Customers: {len(self._customers)}"


def _duplicates(entities: list) -> list:
    """Entities with at least one *distinct* content-equal peer, in order."""
    return [
        entity
        for entity in entities
        if any(other is not entity and other.same_content(entity) for other in entities)
    ]
