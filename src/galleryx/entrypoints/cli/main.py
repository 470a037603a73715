"""GALLERYX CLI entry point.

Defines the top-level ``galleryx`` command (via Click-Extra) and registers the
command groups exposed by the project.

Currently available groups
- ``galleryx artist``   — add, show, search, rename and list duplicate artists.
- ``galleryx artwork``  — consign artworks, move them through their lifecycle,
  edit them and list expired ones.
- ``galleryx customer`` — add, show, search and list duplicate customers.
- ``galleryx order``    — record orders and find the order for an artwork.
- ``galleryx gallery``  — whole-gallery summary.

Notes
- The CLI version is sourced from `galleryx.__version__` and displayed
  automatically by Click-Extra (``--version``).
- The gallery document is loaded when a command opens it and saved when the
  command succeeds.

Examples
    $ galleryx artist add "Rob Miles"
    $ galleryx artwork add 0 "Sunset over the bay" 12000 --state InGallery
    $ galleryx gallery summary
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from galleryx import __version__, config
from galleryx.bootstrap import bootstrap
from galleryx.logging import LogSettings, configure_logging, log_startup

from .artists import artist as artist_group
from .artworks import artwork as artwork_group
from .customers import customer as customer_group
from .gallery_cmds import gallery as gallery_group
from .helpers.log_level_parser import parse_log_level
from .orders import order as order_group

logger = logging.getLogger(__name__)


HELP = """GALLERYX command-line interface.

    GALLERYX keeps the inventory of an art gallery: the artists who consign work,
    their artworks as they move between the waiting list, the gallery floor, the
    artist and a buyer, and the customers who order them. Everything is kept in a
    single XML document that is saved after every successful command.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the gallery XML document.",
    default=None,
    envvar=config.DATA_FILE_ENV,
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("galleryx", appauthor=False)) / "latest.log",
    envvar="GALLERYX_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="GALLERYX_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via GALLERYX_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a command is "
        "refused or the gallery document cannot be used, or on clean exit if "
        "--force-flush is set. "
        "Use --no-flight-recorder to disable."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR; console output is unaffected."
    ),
    default=False,
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). This changes the "
        "logger's own level, so it applies to BOTH console and flight-recorder. "
        "Repeatable (e.g. -L galleryx.domain=INFO -L click_extra=ERROR) or via "
        "GALLERYX_LOGGER_LEVEL (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def galleryx(  # pylint: disable=too-many-arguments, too-many-locals, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    data_file: Path | None,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """GALLERYX command-line interface."""
    settings = LogSettings(
        verbosity=verbose_count - quiet_count,
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)

    try:
        container = bootstrap(data_file)
    except config.InvalidConfigError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj = container

    log_startup(
        logger,
        settings,
        app_version=__version__,
        data_file=container.data_file,
        duplicate_scope=container.duplicate_scope,
        handlers=handlers,
    )

    ctx.call_on_close(logging.shutdown)


galleryx.add_command(artist_group)
galleryx.add_command(artwork_group)
galleryx.add_command(customer_group)
galleryx.add_command(order_group)
galleryx.add_command(gallery_group)
