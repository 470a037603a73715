"""Unit tests for the Gallery aggregate root."""

import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from galleryx.domain import errors
from galleryx.domain.aggregates import Gallery
from galleryx.domain.entities import Artist, Artwork, Customer, Order
from galleryx.domain.value_objects import (
    NOT_FOUND_ID,
    ArtworkState,
    ArtworkType,
    DuplicateScope,
    Lookup,
)

# pylint: disable=magic-value-comparison,too-few-public-methods,redefined-outer-name

IN = ArtworkState.IN_GALLERY


class TestGalleryScenarios:
    """Walk-throughs of the gallery's headline behaviours."""

    @staticmethod
    def test_first_artwork_on_display_counts_everywhere(gallery, now):
        """Adding an artwork on display bumps the artist and gallery counts."""
        artist_id = gallery.add_artist(Artist("Rob Miles"))
        artwork = Artwork("Mona Lisa", Decimal("12000.00"), now, ArtworkType.PAINTING, IN)

        artwork_id = gallery.add_artwork(artist_id, artwork)

        assert artwork_id == 0
        assert gallery.artists[artist_id].artworks_in_gallery_count == 1
        assert gallery.artworks_in_gallery == 1
        assert artwork.artist_id == artist_id

    @staticmethod
    def test_return_and_redisplay_records_two_dates(gallery, artist_in_gallery, now):
        """Returning an artwork and putting it back adds a second display date."""
        artwork = Artwork("The Scream", 500, now, state=IN)
        artwork_id = gallery.add_artwork(artist_in_gallery, artwork)

        artwork.return_to_artist()
        artwork.add_to_gallery(now + timedelta(days=1))

        assert gallery.find_artwork(artwork_id).value.state is IN
        assert len(artwork.display_dates) == 2

    @staticmethod
    def test_sixth_displayed_artwork_is_rejected(gallery, artist_in_gallery, make_artwork):
        """The per-artist quota applies when adding through the gallery."""
        for _ in range(5):
            gallery.add_artwork(artist_in_gallery, make_artwork(state=IN))

        with pytest.raises(errors.QuotaExceededError):
            gallery.add_artwork(artist_in_gallery, make_artwork(state=IN))

        artist = gallery.artists[artist_in_gallery]
        assert artist.artworks_in_gallery_count == 5
        assert len(artist.stock) == 5
        assert gallery.artwork_id_count == 5


class TestGalleryIds:
    """Tests for id issuance."""

    @staticmethod
    def test_ids_start_at_zero_and_increase(gallery):
        """Each kind of id has its own counter starting at 0."""
        assert gallery.add_artist(Artist("A")) == 0
        assert gallery.add_artist(Artist("B")) == 1
        assert gallery.add_customer(Customer("C")) == 0
        assert gallery.artist_id_count == 2
        assert gallery.customer_id_count == 1
        assert gallery.artwork_id_count == 0
        assert gallery.order_id_count == 0

    @staticmethod
    def test_new_id_methods_issue_and_advance(gallery):
        """The new_*_id helpers hand out the next value of each counter."""
        assert gallery.new_artwork_id() == 0
        assert gallery.new_artwork_id() == 1
        assert gallery.new_order_id() == 0
        assert gallery.new_artist_id() == 0
        assert gallery.new_customer_id() == 0
        assert gallery.artwork_id_count == 2

    @staticmethod
    def test_failed_add_does_not_consume_an_id(gallery, artist_in_gallery, make_artwork):
        """Ids are issued only after every check has passed."""
        with pytest.raises(errors.ArtistNotFoundError):
            gallery.add_artwork(99, make_artwork())
        gallery.add_artwork(artist_in_gallery, make_artwork(description="Mona Lisa"))
        with pytest.raises(errors.DuplicateArtworkError):
            gallery.add_artwork(artist_in_gallery, make_artwork(description="Mona Lisa"))

        assert gallery.artwork_id_count == 1

    @staticmethod
    def test_concurrent_adds_issue_unique_ids(gallery):
        """Ids stay unique when artists are added from several threads."""
        ids: list[int] = []
        lock = threading.Lock()

        def _worker(n: int) -> None:
            for i in range(50):
                new_id = gallery.add_artist(Artist(f"T{n}-{i}"))
                with lock:
                    ids.append(new_id)

        threads = [threading.Thread(target=_worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(ids) == list(range(400))
        assert gallery.artist_id_count == 400


class TestGalleryArtists:
    """Tests for artist lookups."""

    @staticmethod
    def test_find_artist_and_reverse_lookup(gallery):
        """Artists are found by id, and ids by artist identity."""
        artist = Artist("Rob Miles")
        artist_id = gallery.add_artist(artist)

        assert gallery.find_artist(artist_id) == Lookup(artist_id, artist)
        assert gallery.get_artist_id(artist) == artist_id

    @staticmethod
    def test_misses_return_sentinel(gallery):
        """Unknown ids and foreign artists give the not-found sentinel."""
        assert gallery.find_artist(5) == Lookup(NOT_FOUND_ID, None)
        assert gallery.get_artist_id(Artist("Stranger")) == NOT_FOUND_ID

    @staticmethod
    def test_find_artists_by_name(gallery):
        """Name search is a case-insensitive substring match."""
        rob = Artist("Rob Miles")
        rob_id = gallery.add_artist(rob)
        gallery.add_artist(Artist("Jo Smith"))

        assert gallery.find_artists_by_name("miles") == [Lookup(rob_id, rob)]
        assert gallery.find_artists_by_name("xyz") == []

    @staticmethod
    def test_find_artists_by_name_rejects_long_pattern(gallery):
        """Patterns longer than a name cannot match and are rejected."""
        with pytest.raises(errors.InvalidSearchTermError, match="limit: 20"):
            gallery.find_artists_by_name("n" * 21)

    @staticmethod
    def test_check_duplicate_artists(gallery):
        """Artists sharing a name are all reported, singletons are not."""
        first = Artist("Rob Miles")
        second = Artist("Rob Miles")
        gallery.add_artist(first)
        gallery.add_artist(Artist("Jo Smith"))
        gallery.add_artist(second)

        assert gallery.check_duplicate_artists() == [first, second]

    @staticmethod
    def test_artists_view_is_read_only(gallery):
        """The artists mapping cannot be modified from outside."""
        with pytest.raises(TypeError):
            gallery.artists[0] = Artist("Intruder")  # type: ignore[index]


class TestGalleryArtworks:
    """Tests for adding and finding artworks."""

    @staticmethod
    def test_unknown_artist_is_rejected(gallery, make_artwork):
        """Artworks must be consigned to an existing artist."""
        with pytest.raises(errors.ArtistNotFoundError, match="Artist 3 not found."):
            gallery.add_artwork(3, make_artwork())

    @staticmethod
    def test_capacity_of_fifty(gallery, fill_gallery, make_artwork):
        """The 51st artwork arriving on display is refused; waiting ones are not."""
        fill_gallery(gallery, 50)
        spare = gallery.add_artist(Artist("Late comer"))

        with pytest.raises(errors.CapacityExceededError, match="capacity already reached: 50"):
            gallery.add_artwork(spare, make_artwork(state=IN))

        gallery.add_artwork(spare, make_artwork())
        assert gallery.artworks_in_gallery == 50

    @staticmethod
    def test_capacity_checked_before_duplicates(gallery, fill_gallery, make_artwork):
        """When both apply, the capacity error wins."""
        ids = fill_gallery(gallery, 50)
        copy = gallery.find_artwork(ids[0]).value
        twin = make_artwork(description=copy.description, price=copy.price, state=IN)

        with pytest.raises(errors.CapacityExceededError):
            gallery.add_artwork(0, twin)

    @staticmethod
    def test_duplicates_are_gallery_wide_by_default(gallery, make_artwork):
        """A content-equal artwork held by another artist is a duplicate."""
        rob = gallery.add_artist(Artist("Rob Miles"))
        jo = gallery.add_artist(Artist("Jo Smith"))
        gallery.add_artwork(rob, make_artwork(description="Mona Lisa"))

        with pytest.raises(errors.DuplicateArtworkError, match="held by Rob Miles"):
            gallery.add_artwork(jo, make_artwork(description="Mona Lisa"))

    @staticmethod
    def test_artist_scope_allows_cross_artist_copies(make_artwork):
        """With the artist scope only the target artist's stock is checked."""
        gallery = Gallery(DuplicateScope.ARTIST)
        rob = gallery.add_artist(Artist("Rob Miles"))
        jo = gallery.add_artist(Artist("Jo Smith"))
        gallery.add_artwork(rob, make_artwork(description="Mona Lisa"))

        assert gallery.add_artwork(jo, make_artwork(description="Mona Lisa")) == 1
        with pytest.raises(errors.DuplicateArtworkError):
            gallery.add_artwork(rob, make_artwork(description="Mona Lisa"))

    @staticmethod
    def test_find_artwork_across_artists(gallery, make_artwork):
        """Artworks are found whichever artist holds them."""
        gallery.add_artist(Artist("Rob Miles"))
        jo = gallery.add_artist(Artist("Jo Smith"))
        artwork = make_artwork()
        artwork_id = gallery.add_artwork(jo, artwork)

        assert gallery.find_artwork(artwork_id) == Lookup(artwork_id, artwork)
        assert gallery.find_artwork(artwork_id + 1) == Lookup.missing()

    @staticmethod
    def test_find_artworks_by_description_spans_artists(gallery, make_artwork):
        """Results from every artist are combined."""
        rob = gallery.add_artist(Artist("Rob Miles"))
        jo = gallery.add_artist(Artist("Jo Smith"))
        gallery.add_artwork(rob, make_artwork(description="Harbour at dawn"))
        gallery.add_artwork(jo, make_artwork(description="Harbour at dusk"))
        gallery.add_artwork(jo, make_artwork(description="Mona Lisa"))

        found = gallery.find_artworks_by_description("HARBOUR")

        assert [artwork_id for artwork_id, _ in found] == [0, 1]

    @staticmethod
    def test_find_artworks_by_description_propagates_validation(gallery, artist_in_gallery):
        """An invalid pattern is rejected once artists exist to search."""
        with pytest.raises(errors.InvalidSearchTermError):
            gallery.find_artworks_by_description(" ")


class TestGalleryStateChanges:
    """Tests for change_artwork_state."""

    @staticmethod
    def test_unknown_artwork_is_rejected(gallery):
        """State changes need an existing artwork."""
        with pytest.raises(errors.ArtworkNotFoundError):
            gallery.change_artwork_state(0, ArtworkState.SOLD)

    @staticmethod
    def test_display_uses_given_date(gallery, artist_in_gallery, make_artwork, now):
        """Putting an artwork on display records the given date."""
        artwork = make_artwork()
        artwork_id = gallery.add_artwork(artist_in_gallery, artwork)

        gallery.change_artwork_state(artwork_id, IN, now)

        assert artwork.state is IN
        assert artwork.display_dates == (now,)

    @staticmethod
    def test_display_defaults_to_now(gallery, artist_in_gallery, make_artwork):
        """Without a date the current time is recorded."""
        artwork = make_artwork()
        artwork_id = gallery.add_artwork(artist_in_gallery, artwork)
        before = datetime.now(timezone.utc)

        gallery.change_artwork_state(artwork_id, IN)

        assert artwork.most_recent_display_date >= before

    @staticmethod
    def test_redisplay_respects_artist_quota(gallery, artist_in_gallery, make_artwork):
        """A sixth artwork cannot be put back on display for the same artist."""
        for _ in range(5):
            gallery.add_artwork(artist_in_gallery, make_artwork(state=IN))
        waiting = gallery.add_artwork(artist_in_gallery, make_artwork())

        with pytest.raises(errors.ArtistQuotaExceededError):
            gallery.change_artwork_state(waiting, IN)
        assert gallery.find_artwork(waiting).value.state is ArtworkState.AWAITING_GALLERY_ENTRY

    @staticmethod
    def test_redisplay_respects_capacity(gallery, fill_gallery, make_artwork):
        """Nothing else can go on display once fifty artworks are shown."""
        fill_gallery(gallery, 50)
        spare = gallery.add_artist(Artist("Late comer"))
        waiting = gallery.add_artwork(spare, make_artwork())

        with pytest.raises(errors.CapacityExceededError):
            gallery.change_artwork_state(waiting, IN)

    @staticmethod
    def test_full_gallery_is_reported_before_the_lifecycle(gallery, fill_gallery):
        """Re-displaying a shown artwork in a full gallery is a capacity error."""
        shown = fill_gallery(gallery, 50)

        with pytest.raises(errors.CapacityExceededError):
            gallery.change_artwork_state(shown[0], IN)

    @staticmethod
    def test_full_quota_is_reported_before_the_lifecycle(
        gallery, artist_in_gallery, make_artwork
    ):
        """With room in the gallery, the artist's quota is checked next."""
        shown = [gallery.add_artwork(artist_in_gallery, make_artwork(state=IN)) for _ in range(5)]

        with pytest.raises(errors.ArtistQuotaExceededError):
            gallery.change_artwork_state(shown[0], IN)
        assert len(gallery.find_artwork(shown[0]).value.display_dates) == 1

    @staticmethod
    def test_redisplay_within_limits_is_an_illegal_move(gallery, artist_in_gallery, make_artwork):
        """Below both limits, a displayed artwork is refused by its lifecycle."""
        shown = gallery.add_artwork(artist_in_gallery, make_artwork(state=IN))

        with pytest.raises(errors.BadStateTransitionError, match="already in the Gallery"):
            gallery.change_artwork_state(shown, IN)

    @staticmethod
    def test_other_targets_follow_the_lifecycle(gallery, artist_in_gallery, make_artwork):
        """Selling a waiting artwork is refused; selling a displayed one works."""
        artwork_id = gallery.add_artwork(artist_in_gallery, make_artwork())
        with pytest.raises(errors.BadStateTransitionError):
            gallery.change_artwork_state(artwork_id, ArtworkState.SOLD)

        gallery.change_artwork_state(artwork_id, IN)
        gallery.change_artwork_state(artwork_id, ArtworkState.SOLD)
        assert gallery.find_artwork(artwork_id).value.state is ArtworkState.SOLD

    @staticmethod
    def test_find_expired_artworks(gallery, artist_in_gallery, make_artwork, now):
        """Only returned artworks past their 14-day window are listed."""
        old = gallery.add_artwork(
            artist_in_gallery, make_artwork(state=IN, display_date=now - timedelta(days=30))
        )
        recent = gallery.add_artwork(
            artist_in_gallery, make_artwork(state=IN, display_date=now - timedelta(days=3))
        )
        gallery.add_artwork(
            artist_in_gallery, make_artwork(state=IN, display_date=now - timedelta(days=60))
        )
        gallery.change_artwork_state(old, ArtworkState.RETURNED_TO_ARTIST)
        gallery.change_artwork_state(recent, ArtworkState.RETURNED_TO_ARTIST)

        assert [artwork_id for artwork_id, _ in gallery.find_expired_artworks(now)] == [old]


class TestGalleryCustomersAndOrders:
    """Tests for customers and their orders."""

    @staticmethod
    def test_customer_lookups(gallery):
        """Customers are found by id, by name and by identity."""
        ann = Customer("Ann Buyer")
        ann_id = gallery.add_customer(ann)

        assert gallery.find_customer(ann_id) == Lookup(ann_id, ann)
        assert gallery.find_customer(9) == Lookup.missing()
        assert gallery.find_customers_by_name("ann") == [Lookup(ann_id, ann)]
        assert gallery.get_customer_id(ann) == ann_id
        assert gallery.get_customer_id(Customer("Ann Buyer")) == NOT_FOUND_ID

    @staticmethod
    def test_check_duplicate_customers(gallery):
        """Customers sharing a name are reported."""
        first = Customer("Ann Buyer")
        second = Customer("Ann Buyer")
        gallery.add_customer(first)
        gallery.add_customer(second)
        gallery.add_customer(Customer("Bo Buyer"))

        assert gallery.check_duplicate_customers() == [first, second]

    @staticmethod
    def test_add_order(gallery, artist_in_gallery, make_artwork, now):
        """Orders get their own ids and a link back to the customer."""
        artwork_id = gallery.add_artwork(artist_in_gallery, make_artwork())
        ann_id = gallery.add_customer(Customer("Ann Buyer"))
        order = Order(artwork_id, now)

        assert gallery.add_order(ann_id, order) == 0
        assert order.customer_id == ann_id
        assert gallery.find_order_by_artwork_id(artwork_id) == Lookup(0, order)
        assert gallery.find_order_by_artwork_id(artwork_id + 1) == Lookup.missing()

    @staticmethod
    def test_order_rejections(gallery, artist_in_gallery, make_artwork, now):
        """Unknown customers, unknown artworks and duplicates are refused."""
        artwork_id = gallery.add_artwork(artist_in_gallery, make_artwork())
        ann_id = gallery.add_customer(Customer("Ann Buyer"))
        bo_id = gallery.add_customer(Customer("Bo Buyer"))
        gallery.add_order(ann_id, Order(artwork_id, now))

        with pytest.raises(errors.CustomerNotFoundError):
            gallery.add_order(7, Order(artwork_id, now))
        with pytest.raises(errors.ArtworkNotFoundError):
            gallery.add_order(ann_id, Order(artwork_id + 1, now))
        with pytest.raises(errors.DuplicateOrderError, match="made by Ann Buyer"):
            gallery.add_order(bo_id, Order(artwork_id, now))

        assert gallery.order_id_count == 1

    @staticmethod
    def test_str(gallery):
        """The summary line counts artists and customers."""
        gallery.add_artist(Artist("Rob Miles"))
        assert str(gallery) == "No. of Artists: 1, No. of Customers: 0"


class TestGalleryRestore:
    """Tests for the restore construction path."""

    @staticmethod
    def test_restore_relinks_parents_and_continues_counters(make_artwork, now):
        """Restored galleries carry on issuing ids after the saved counters."""
        artist = Artist("Rob Miles")
        artwork = make_artwork()
        artist.stock[4] = artwork
        customer = Customer("Ann Buyer")
        order = Order(4, now)
        customer.orders[2] = order

        gallery = Gallery.restore(
            artists={3: artist},
            customers={1: customer},
            artwork_id_count=5,
            artist_id_count=4,
            order_id_count=3,
            customer_id_count=2,
        )

        assert artwork.artist_id == 3
        assert order.customer_id == 1
        assert gallery.add_artist(Artist("Jo Smith")) == 4
        assert gallery.add_artwork(3, make_artwork()) == 5
