"""Global pytest fixtures for GALLERYX."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

pytest_plugins = [
    "tests.fixtures.datagen",
]


@pytest.fixture
def now() -> datetime:
    """A fixed, timezone-aware reference instant for date arithmetic."""
    return datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _isolated_gallery_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from reading a developer's GALLERYX settings."""
    for name in ("GALLERYX_DATA_FILE", "GALLERYX_DUPLICATE_SCOPE", "GALLERYX_LOGGER_LEVEL"):
        monkeypatch.delenv(name, raising=False)
