"""Logging configuration for the app and snapshot entry points.

Library modules only create `logging.getLogger(__name__)` loggers; handlers
are installed here, once, by whichever entry point runs.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: str = "INFO", format_string: str | None = None, filename: str | None = None
) -> None:
    """Configure application-wide logging.

    Safe to call repeatedly; each call replaces the previous handlers.

    Args:
        level: Logging level name, case-insensitive.
        format_string: Record format. Defaults to timestamp, logger name and level.
        filename: Log file path. Logs go to stdout when None.
    """
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename)
    else:
        handler = logging.StreamHandler(sys.stdout)

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=[handler],
        force=True,
    )
