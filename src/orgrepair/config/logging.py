"""Logging setup for the orgrepair command line."""

from __future__ import annotations

import logging
from typing import Final

CLI_FORMAT: Final[str] = "%(levelname)s %(message)s"
DEBUG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def log_format(level: int) -> str:
    """Pick the record format: repair phases and timings only show up when debugging."""

    return DEBUG_FORMAT if level <= logging.DEBUG else CLI_FORMAT


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once.

    At INFO and above a run prints only the repair summary lines; ``--verbose``
    lowers the level to DEBUG and switches to a timestamped format that names the
    emitting phase. Pass ``force=True`` to reconfigure an already set up logger.
    """

    logging.basicConfig(
        level=level,
        format=log_format(level),
        datefmt="%H:%M:%S",
        force=force,
    )
