"""Log-level configuration for pkgkeeper."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from pkgkeeper.models.settings import LogLevel

ROOT_LOGGER_NAME = "pkgkeeper"

_LEVELS = {
    LogLevel.QUIET: logging.ERROR,
    LogLevel.MINIMAL: logging.WARNING,
    LogLevel.NORMAL: logging.INFO,
    LogLevel.DETAILED: logging.DEBUG,
}


def to_logging_level(level: LogLevel) -> int:
    """Map a command verbosity to a standard logging level."""
    return _LEVELS[level]


def configure_log_level(
    level: LogLevel, console: Optional[Console] = None
) -> logging.Logger:
    """Install a Rich handler on the pkgkeeper logger at the given verbosity.

    Handlers installed by earlier calls are replaced.

    Args:
        level: Verbosity chosen by the user.
        console: Console to render to. Defaults to a stderr console.

    Returns:
        The configured pkgkeeper logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_time=False,
        show_path=level == LogLevel.DETAILED,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(to_logging_level(level))
    return logger
