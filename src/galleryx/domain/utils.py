"""Domain layer utilities."""

from datetime import datetime, timezone

from galleryx.domain.errors import InvalidSearchTermError


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with aware ones.

    Args:
        value: The datetime to normalize.

    Returns:
        ``value`` unchanged if it carries a tzinfo, otherwise ``value`` tagged as UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def text_overflow(text: str, max_chars: int) -> int:
    """Return how many characters ``text`` exceeds ``max_chars`` by (0 if it fits)."""
    return max(0, len(text) - max_chars)


def contains_ignore_case(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test."""
    return needle.casefold() in haystack.casefold()


def normalize_search_term(pattern: str, max_chars: int) -> str:
    """Trim a search pattern and check it against the searched field's length.

    Args:
        pattern: The raw search pattern.
        max_chars: Maximum length of the field being searched.

    Returns:
        The trimmed pattern.

    Raises:
        InvalidSearchTermError: If the trimmed pattern is empty or too long.
    """
    term = pattern.strip()
    if not term or len(term) > max_chars:
        raise InvalidSearchTermError(term, max_chars)
    return term
