"""Unit-of-work session shared by every GALLERYX command.

`open_gallery` yields the loaded gallery, commits it when the command body
finishes, and turns domain and persistence failures into a red error line and
exit status 1. Nothing is written when the body raises.

A refusal is logged at WARNING and an unusable document at ERROR, both of
which make the flight recorder write out what led up to them. The console
only shows the error line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from galleryx.bootstrap import AppContainer
from galleryx.domain.aggregates import Gallery
from galleryx.domain.errors import DomainError
from galleryx.interfaces.gallery_store import GalleryStoreError
from galleryx.logging import RECORDER_ONLY

from .messages import error

logger = logging.getLogger(__name__)


@contextmanager
def open_gallery(commit: bool = True) -> Iterator[Gallery]:
    """Open the configured gallery for the duration of a command.

    Args:
        commit: Save the gallery when the body completes. Read-only commands
            pass False.
    """
    ctx = click.get_current_context()
    container = ctx.find_object(AppContainer)
    if container is None:  # pragma: no cover
        raise click.ClickException("The gallery has not been configured.")

    try:
        with container.uow as uow:
            yield uow.gallery
            if commit:
                uow.commit()
    except DomainError as e:
        logger.warning("%s refused: %s", ctx.command_path, e, extra=RECORDER_ONLY)
        error(str(e))
        ctx.exit(1)
    except GalleryStoreError as e:
        logger.error("%s failed: %s", ctx.command_path, e, extra=RECORDER_ONLY)
        error(str(e))
        ctx.exit(1)
