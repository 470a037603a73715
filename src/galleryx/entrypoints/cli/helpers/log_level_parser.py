"""Helpers for parsing logger-level CLI options.

Parses options of the form NAME=LEVEL (repeatable, or comma/space-separated
when read from an environment variable) into a name -> numeric level mapping.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a raw option value into non-empty NAME=LEVEL fragments."""
    raw = [value] if isinstance(value, str) else list(value)
    return [item for chunk in raw for item in re.split(r"[,\s]+", chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from DEFAULT_LIB_LEVELS; later items override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelName(level_name.strip().upper())
        if not isinstance(level, int):
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels
