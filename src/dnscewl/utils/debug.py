"""Logging setup for console sessions.

Diagnostics go to standard error through rich so they never mix with the
candidate stream on standard output.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "dnscewl"


def configure_logging(verbose: bool = False, console: Console | None = None) -> logging.Logger:
    """Install a rich handler on the ``dnscewl`` logger and return it.

    Calling this again replaces the previous handler, so each CLI run starts clean.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
