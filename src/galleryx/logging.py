"""Logging setup for the GALLERYX CLI.

Console records go to stderr through Rich at the verbosity chosen with -v/-q.
Independently of that verbosity, a bounded in-memory "flight recorder" keeps
every record and writes it to disk when a command is refused or the gallery
document cannot be used, so the steps leading up to the failure can be read
back afterwards.

Refusals are already shown to the user as a red error line; the records that
describe them are tagged with `RECORDER_ONLY` so the console does not repeat
them.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from galleryx.domain.value_objects import DuplicateScope

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "galleryx"

RECORDER_ONLY: Mapping[str, bool] = {"recorder_only": True}
"""Pass as ``extra=`` to keep a record out of the console."""

CONSOLE_FORMAT = "%(prefix)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s "
    "%(name)s:%(lineno)d: %(message)s"
)


@dataclass(frozen=True)
class LogSettings:
    """Everything the CLI options say about logging.

    Attributes:
        verbosity: Number of -v minus number of -q.
        debug: Developer mode: everything at DEBUG, with source locations.
        color: Let Rich colour the console.
        log_path: Where the flight recorder writes; None disables it.
        capacity: Number of records the flight recorder keeps.
        force_flush: Write the flight recorder out on exit even without a failure.
        logger_levels: Minimum level per logger name, applied to both outputs.
    """

    verbosity: int = 0
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING by default, one level per step of verbosity, within DEBUG..CRITICAL."""
        if self.debug:
            return logging.DEBUG
        level = logging.WARNING - 10 * self.verbosity
        return max(logging.DEBUG, min(logging.CRITICAL, level))


class ConsoleFilter(logging.Filter):
    """Decide what reaches the console and how its lines are prefixed.

    Records logged with `RECORDER_ONLY` are dropped. Records from other
    libraries get a short "[library] " prefix, GALLERYX records none.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "recorder_only", False):
            return False
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}] "
        return True


def _console_handler(settings: LogSettings) -> RichHandler:
    handler = RichHandler(
        level=settings.console_level,
        console=Console(color_system="auto" if settings.color else None, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    handler.setFormatter(
        logging.Formatter(DEBUG_CONSOLE_FORMAT if settings.debug else CONSOLE_FORMAT)
    )
    handler.addFilter(ConsoleFilter())
    return handler


def _flight_recorder(settings: LogSettings, path: Path) -> MemoryHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    # truncated per run; delay keeps clean runs from creating the file
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=settings.capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=settings.force_flush,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the console handler and, if enabled, the flight recorder.

    The root logger is opened up to DEBUG so that the flight recorder sees
    everything; the console handler filters by its own level. Per-logger
    levels from `settings` then narrow both outputs.

    Returns:
        The handlers attached to the root logger.
    """
    handlers: list[logging.Handler] = [_console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(_flight_recorder(settings, settings.log_path))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    settings: LogSettings,
    *,
    app_version: str,
    data_file: Path,
    duplicate_scope: DuplicateScope,
    handlers: list[logging.Handler],
) -> None:
    """Record which gallery document this run works on and how logging is set up."""
    logger.info(
        "GALLERYX %s - data=%s (%s), duplicates=%s, console=%s, flight-recorder=%s",
        app_version,
        data_file,
        f"{data_file.stat().st_size} bytes" if data_file.is_file() else "new",
        duplicate_scope.value,
        logging.getLevelName(settings.console_level),
        "OFF" if settings.log_path is None else "ON",
    )
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.log_path is not None:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, force-flush=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
