"""Configuration utilities for GALLERYX.

This module centralizes small helpers and constants related to application configuration.
"""

import os
from pathlib import Path

from platformdirs import user_data_dir

from galleryx.domain.value_objects import DuplicateScope

DATA_FILE_ENV = "GALLERYX_DATA_FILE"  # pragma: no mutate
DUPLICATE_SCOPE_ENV = "GALLERYX_DUPLICATE_SCOPE"  # pragma: no mutate
DEFAULT_DATA_FILENAME = "GalleryX.xml"  # pragma: no mutate


class InvalidConfigError(Exception):
    """Raised when a GALLERYX environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"{name}={value!r} is invalid; expected {expected}.")
        self.name = name
        self.value = value


def default_data_file() -> Path:
    """Per-user location of the gallery document."""
    return Path(user_data_dir("galleryx", appauthor=False)) / DEFAULT_DATA_FILENAME


def get_data_file() -> Path:
    """Get the path of the gallery document.

    Returns:
        The value of `GALLERYX_DATA_FILE` if set, otherwise the per-user default.
    """
    if path := os.environ.get(DATA_FILE_ENV):
        return Path(path).expanduser()
    return default_data_file()


def get_duplicate_scope() -> DuplicateScope:
    """Get the duplicate-artwork policy.

    Returns:
        The scope named by `GALLERYX_DUPLICATE_SCOPE` (``gallery`` or ``artist``),
        defaulting to ``gallery``.

    Raises:
        InvalidConfigError: If the variable holds any other value.
    """
    raw = os.environ.get(DUPLICATE_SCOPE_ENV, "").strip().lower()
    if not raw:
        return DuplicateScope.GALLERY
    try:
        return DuplicateScope(raw)
    except ValueError as e:
        choices = " or ".join(repr(s.value) for s in DuplicateScope)
        raise InvalidConfigError(DUPLICATE_SCOPE_ENV, raw, choices) from e
