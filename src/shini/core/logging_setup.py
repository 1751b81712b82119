"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "shini"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Route ``shini`` diagnostics to stderr through Rich.

    stdout stays reserved for values, so ``$(shini get ...)`` captures only
    the value. Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, RichHandler):
            logger.removeHandler(h)

    if quiet:
        level = logging.CRITICAL + 1
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
