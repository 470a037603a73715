"""Default marks for tests under `tests/functional/`."""

from pathlib import Path

import pytest

from tests.helpers.markers import add_default_marker

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `functional` marks to items in `tests/functional/`."""
    add_default_marker(items, FUNCTIONAL_ROOT, "functional")
