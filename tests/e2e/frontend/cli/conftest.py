"""Fixtures for end-to-end CLI tests.

Every test runs inside an isolated filesystem and invokes ``galleryx`` against
a throwaway data file, with the flight recorder writing next to it.
"""

from collections.abc import Callable, Mapping

import pytest
from click.testing import CliRunner, Result

from galleryx.entrypoints.cli.main import galleryx
from tests.helpers.cli import DATA_FILE, LOG_FILE

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def gx(runner, fs) -> Callable[..., Result]:
    """Invoke ``galleryx`` against a data file inside the isolated filesystem.

    The flight recorder writes next to it so no test touches the user's log
    directory. Extra environment variables can be passed as ``env=``.
    """

    def _invoke(*args: str, env: Mapping[str, str] | None = None) -> Result:
        return runner.invoke(
            galleryx,
            ["--data-file", DATA_FILE, "--log-path", LOG_FILE, *args],
            env=env,
        )

    return _invoke
