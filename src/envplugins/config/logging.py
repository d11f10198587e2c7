"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def level_for_verbosity(verbose: int) -> int:
    """Map a repeated ``-v`` count onto a logging level."""

    if verbose >= 2:  # noqa: PLR2004
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once, writing to stderr.

    Standard output is reserved for the reconciled snapshot, so log records never
    go there. Pass ``force=True`` to reconfigure during tests.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
        force=force,
    )
