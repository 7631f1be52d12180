"""
Logging setup for mojo_codegen.

Modules obtain their logger through get_logger(__name__); the command
line entry point calls setup_logging() once to attach a rich handler.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "mojo_codegen"

_handler: Optional[RichHandler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger that lives under the package logger hierarchy."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.INFO, console: Optional[Console] = None
) -> logging.Logger:
    """
    Configure the package logger with a RichHandler.

    Calling this more than once replaces the handler rather than stacking
    a second one, so repeated CLI invocations in one process log once.

    Args:
        level: Logging level name or number
        console: Console to log to (defaults to stderr)

    Returns:
        The configured package logger
    """
    global _handler

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    _handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(_handler)
    logger.setLevel(level)
    return logger
