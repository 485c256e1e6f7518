"""
Logging helpers for zinfo.

The status lines go to stdout, so log records are kept on stderr and
stay quiet unless verbosity is raised with --verbose.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "zinfo %(levelname)s %(name)s: %(message)s"


def verbosity_level(verbosity: int) -> int:
    """
    Map a --verbose count to a logging level.

    0 -> WARNING, 1 -> INFO, 2 or more -> DEBUG
    """

    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int) -> None:
    """Send log records at the level chosen by verbosity to stderr."""

    logging.basicConfig(
        level=verbosity_level(verbosity),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
