"""Logging setup — stdlib logging rendered through Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "commitguard"


def setup_logging(*, verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    WARNING by default, INFO with *verbose*, DEBUG with *debug*. Safe to call
    more than once; the handler is replaced rather than duplicated.
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        rich_tracebacks=debug,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
