"""Domain-layer error definitions.

Every error carries a message suitable for showing to the user verbatim.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when a field value is out of bounds."""


class CapacityError(DomainError):
    """Raised when a gallery or per-artist display limit would be exceeded."""


class DuplicateError(DomainError):
    """Raised when a content-equal entity is already present."""


class NotFoundError(DomainError, LookupError):
    """Raised when an operation targets an id that does not exist.

    Finders never raise this; they return a not-found `Lookup` instead.
    """


class InvalidTransitionError(DomainError):
    """Raised when an entity is in an invalid state for the attempted action."""


# ============================================================================
#                           Field validation errors
# ============================================================================


class BadNameError(ValidationError):
    """Raised when an artist or customer name is too long or blank."""

    def __init__(self, message: str, overflow: int = 0) -> None:
        super().__init__(message)
        self.overflow = overflow


class BadDescriptionError(ValidationError):
    """Raised when an artwork description is too long or blank."""

    def __init__(self, message: str, overflow: int = 0) -> None:
        super().__init__(message)
        self.overflow = overflow


class BadPriceError(ValidationError):
    """Raised when an artwork price is outside the accepted bounds."""

    def __init__(self, price: object, message: str) -> None:
        super().__init__(message)
        self.price = price


class BadDateError(ValidationError):
    """Raised when a display date lies too far in the future."""


class InvalidSearchTermError(ValidationError):
    """Raised when a search pattern is empty or longer than the searched field."""

    def __init__(self, pattern: str, max_chars: int) -> None:
        if pattern:
            message = (
                f"Search term is too long by {len(pattern) - max_chars} characters, "
                f"limit: {max_chars}."
            )
        else:
            message = "Search term is blank."
        super().__init__(message)
        self.pattern = pattern
        self.max_chars = max_chars


# ============================================================================
#                           Capacity errors
# ============================================================================


class CapacityExceededError(CapacityError):
    """Raised when the gallery already displays its maximum number of artworks."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Gallery capacity already reached: {capacity}.")
        self.capacity = capacity


class QuotaExceededError(CapacityError):
    """Raised when an artist already has the maximum number of artworks on display."""

    def __init__(self, artist_name: str, quota: int) -> None:
        super().__init__(
            f"Artist {artist_name} has already reached the maximum allowance of "
            f"Artworks in the Gallery: {quota}."
        )
        self.artist_name = artist_name
        self.quota = quota


class ArtistQuotaExceededError(QuotaExceededError):
    """Raised by the gallery when re-displaying an artwork would break the artist quota."""


# ============================================================================
#                           Duplicate errors
# ============================================================================


class DuplicateArtworkError(DuplicateError):
    """Raised when a content-equal artwork is already held by an artist."""

    def __init__(self, description: str, artist_name: str) -> None:
        super().__init__(
            f"Artwork '{description}' is a duplicate of an artwork held by "
            f"{artist_name}."
        )
        self.description = description
        self.artist_name = artist_name


class DuplicateOrderError(DuplicateError):
    """Raised when an order for the same artwork at the same date already exists."""

    def __init__(self, artwork_id: int, customer_name: str) -> None:
        super().__init__(
            f"Order for artwork {artwork_id} duplicates an order made by "
            f"{customer_name}."
        )
        self.artwork_id = artwork_id
        self.customer_name = customer_name


# ============================================================================
#                           Lookup errors
# ============================================================================


class ArtworkNotFoundError(NotFoundError):
    """Raised when no artwork exists with the given id."""

    def __init__(self, artwork_id: int) -> None:
        super().__init__(f"Artwork {artwork_id} not found.")
        self.artwork_id = artwork_id


class ArtistNotFoundError(NotFoundError):
    """Raised when no artist exists with the given id."""

    def __init__(self, artist_id: int) -> None:
        super().__init__(f"Artist {artist_id} not found.")
        self.artist_id = artist_id


class CustomerNotFoundError(NotFoundError):
    """Raised when no customer exists with the given id."""

    def __init__(self, customer_id: int) -> None:
        super().__init__(f"Customer {customer_id} not found.")
        self.customer_id = customer_id


# ============================================================================
#                           Artwork lifecycle errors
# ============================================================================


class BadStateTransitionError(InvalidTransitionError):
    """Raised when an artwork cannot move from its current state to the requested one."""

    def __init__(self, description: str, current: str, requested: str, reason: str) -> None:
        super().__init__(f"Artwork '{description}' {reason}")
        self.description = description
        self.current = current
        self.requested = requested
        self.reason = reason
