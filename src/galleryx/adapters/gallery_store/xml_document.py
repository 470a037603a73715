"""XML document codec for the Gallery aggregate.

The persisted representation is a single hierarchical document::

    <Gallery>
      <ArtworkIDCount/> <ArtistIDCount/> <OrderIDCount/> <CustomerIDCount/>
      <Artist ID="0">
        <Name/>
        <Artwork ID="0">
          <Description/> <Price/> <DisplayDate/>* <Type/> <State/>
        </Artwork>*
      </Artist>*
      <Customer ID="0">
        <Name/>
        <Order ID="0"> <ArtworkID/> <OrderDate/> </Order>*
      </Customer>*
    </Gallery>

Timestamps are ISO-8601 strings, prices are decimal text, and types/states use
their enum values. Parent links are not written; they are recomputed on load.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

from galleryx.domain.aggregates import Gallery
from galleryx.domain.entities import Artist, Artwork, Customer, Order
from galleryx.domain.errors import DomainError
from galleryx.domain.value_objects import ArtworkState, ArtworkType
from galleryx.interfaces.gallery_store import GalleryLoadError

T = TypeVar("T")

ROOT_TAG = "Gallery"
COUNTER_TAGS = ("ArtworkIDCount", "ArtistIDCount", "OrderIDCount", "CustomerIDCount")


class _MalformedDocument(Exception):
    """Internal signal for a structural problem; surfaces as GalleryLoadError."""


# ============================================================================
#                                   Encoding
# ============================================================================


def encode_gallery(gallery: Gallery) -> bytes:
    """Serialize the whole gallery to an indented UTF-8 XML document."""
    root = ET.Element(ROOT_TAG)
    _add_text(root, "ArtworkIDCount", str(gallery.artwork_id_count))
    _add_text(root, "ArtistIDCount", str(gallery.artist_id_count))
    _add_text(root, "OrderIDCount", str(gallery.order_id_count))
    _add_text(root, "CustomerIDCount", str(gallery.customer_id_count))

    for artist_id, artist in gallery.artists.items():
        artist_el = ET.SubElement(root, "Artist", ID=str(artist_id))
        _add_text(artist_el, "Name", artist.name)
        for artwork_id, artwork in artist.stock.items():
            _encode_artwork(artist_el, artwork_id, artwork)

    for customer_id, customer in gallery.customers.items():
        customer_el = ET.SubElement(root, "Customer", ID=str(customer_id))
        _add_text(customer_el, "Name", customer.name)
        for order_id, order in customer.orders.items():
            order_el = ET.SubElement(customer_el, "Order", ID=str(order_id))
            _add_text(order_el, "ArtworkID", str(order.artwork_id))
            _add_text(order_el, "OrderDate", order.order_date.isoformat())

    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def _encode_artwork(parent: ET.Element, artwork_id: int, artwork: Artwork) -> None:
    artwork_el = ET.SubElement(parent, "Artwork", ID=str(artwork_id))
    _add_text(artwork_el, "Description", artwork.description)
    _add_text(artwork_el, "Price", str(artwork.price))
    for display_date in artwork.display_dates:
        _add_text(artwork_el, "DisplayDate", display_date.isoformat())
    _add_text(artwork_el, "Type", artwork.artwork_type.value)
    _add_text(artwork_el, "State", artwork.state.value)


def _add_text(parent: ET.Element, tag: str, text: str) -> None:
    ET.SubElement(parent, tag).text = text


# ============================================================================
#                                   Decoding
# ============================================================================


def decode_gallery(data: bytes) -> Gallery:
    """Rebuild a gallery from an encoded document.

    Raises:
        GalleryLoadError: On malformed XML, a missing element or attribute,
            unparsable text, an entity that fails validation, ids that are
            duplicated or not below their counter, display counts above the
            artist quota or gallery capacity, a displayed artwork without
            display dates, or an order for an artwork that does not exist.
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise GalleryLoadError(f"malformed XML ({e})") from e

    try:
        return _decode_root(root)
    except (_MalformedDocument, ValueError, ArithmeticError, DomainError) as e:
        raise GalleryLoadError(str(e)) from e


def _decode_root(root: ET.Element) -> Gallery:
    if root.tag != ROOT_TAG:
        raise _MalformedDocument(f"root element is <{root.tag}>, expected <{ROOT_TAG}>")

    artwork_count, artist_count, order_count, customer_count = (
        _parse_counter(root, tag) for tag in COUNTER_TAGS
    )

    artists: dict[int, Artist] = {}
    seen_artwork_ids: set[int] = set()
    for artist_el in root.findall("Artist"):
        artist_id = _parse_id(artist_el, artist_count, artists)
        artist = Artist(_child_text(artist_el, "Name"))
        for artwork_el in artist_el.findall("Artwork"):
            artwork_id = _parse_id(artwork_el, artwork_count, seen_artwork_ids)
            seen_artwork_ids.add(artwork_id)
            artist.stock[artwork_id] = _decode_artwork(artwork_el)
        artists[artist_id] = artist

    customers: dict[int, Customer] = {}
    seen_order_ids: set[int] = set()
    for customer_el in root.findall("Customer"):
        customer_id = _parse_id(customer_el, customer_count, customers)
        customer = Customer(_child_text(customer_el, "Name"))
        for order_el in customer_el.findall("Order"):
            order_id = _parse_id(order_el, order_count, seen_order_ids)
            seen_order_ids.add(order_id)
            customer.orders[order_id] = Order(
                int(_child_text(order_el, "ArtworkID")),
                datetime.fromisoformat(_child_text(order_el, "OrderDate")),
            )
        customers[customer_id] = customer

    _check_display_limits(artists)
    _check_order_targets(customers, seen_artwork_ids)

    return Gallery.restore(
        artists=artists,
        customers=customers,
        artwork_id_count=artwork_count,
        artist_id_count=artist_count,
        order_id_count=order_count,
        customer_id_count=customer_count,
    )


def _decode_artwork(artwork_el: ET.Element) -> Artwork:
    # Display dates may sit directly under <Artwork> or inside <DisplayDates>.
    display_dates = [
        datetime.fromisoformat(_element_text(el)) for el in artwork_el.iter("DisplayDate")
    ]
    return Artwork.restore(
        _child_text(artwork_el, "Description"),
        _child_text(artwork_el, "Price"),
        display_dates,
        _parse_enum(ArtworkType, _child_text(artwork_el, "Type")),
        _parse_enum(ArtworkState, _child_text(artwork_el, "State")),
    )


def _check_display_limits(artists: dict[int, Artist]) -> None:
    """Reject a document no sequence of gallery operations could have produced."""
    shown = 0
    for artist_id, artist in artists.items():
        for artwork_id, artwork in artist.stock.items():
            if artwork.state is ArtworkState.IN_GALLERY and not artwork.display_dates:
                raise _MalformedDocument(
                    f"<Artwork> ID {artwork_id} is InGallery but has no <DisplayDate>"
                )
        in_gallery = artist.artworks_in_gallery_count
        if in_gallery > Artist.MAX_ARTWORKS_IN_GALLERY:
            raise _MalformedDocument(
                f"<Artist> ID {artist_id} has {in_gallery} artworks in the gallery, "
                f"above the limit of {Artist.MAX_ARTWORKS_IN_GALLERY}"
            )
        shown += in_gallery
    if shown > Gallery.GALLERY_CAPACITY:
        raise _MalformedDocument(
            f"{shown} artworks are in the gallery, above its capacity of "
            f"{Gallery.GALLERY_CAPACITY}"
        )


def _check_order_targets(customers: dict[int, Customer], artwork_ids: set[int]) -> None:
    for customer in customers.values():
        for order_id, order in customer.orders.items():
            if order.artwork_id not in artwork_ids:
                raise _MalformedDocument(
                    f"<Order> ID {order_id} refers to unknown artwork {order.artwork_id}"
                )


def _child_text(parent: ET.Element, tag: str) -> str:
    child = parent.find(tag)
    if child is None:
        raise _MalformedDocument(f"<{parent.tag}> is missing <{tag}>")
    return _element_text(child)


def _element_text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _parse_counter(root: ET.Element, tag: str) -> int:
    value = int(_child_text(root, tag))
    if value < Gallery.START_ID_NO:
        raise _MalformedDocument(f"<{tag}> is negative: {value}")
    return value


def _parse_id(element: ET.Element, counter: int, seen: set[int] | dict[int, object]) -> int:
    raw = element.get("ID")
    if raw is None:
        raise _MalformedDocument(f"<{element.tag}> is missing its ID attribute")
    value = int(raw)
    if not Gallery.START_ID_NO <= value < counter:
        raise _MalformedDocument(
            f"<{element.tag}> ID {value} is outside the issued range [0, {counter})"
        )
    if value in seen:
        raise _MalformedDocument(f"<{element.tag}> ID {value} appears more than once")
    return value


def _parse_enum(enum_type: Callable[[str], T], text: str) -> T:
    try:
        return enum_type(text)
    except ValueError as e:
        raise _MalformedDocument(f"unknown value {text!r}") from e
