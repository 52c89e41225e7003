"""Logging setup.

Modules log through ``logging.getLogger(__name__)``; this installs a Rich
handler on the shared ``packages`` logger so CLI and API output match.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from .config import LogLevel

ROOT_LOGGER = "packages"


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    console: Optional[Console] = None,
) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling it again replaces the handler instead of stacking a second one.

    Args:
        level: LogLevel or level name
        console: Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    level_name = level.value if isinstance(level, LogLevel) else str(level).upper()

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_nanban", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._nanban = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(level_name)
    return logger
