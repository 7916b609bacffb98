"""Logging for **LinkScout**.

Console messages go to *stderr*, because *stdout* carries the crawl
results and must stay pipeable. Modules log through the shared instance::

    from link_scout.logger import logger
    logger.debug("GET %s", url)

The CLI calls :func:`configure` once at start-up; until then the logger has
no handlers of its own.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

LOGGER_NAME: Final[str] = "LinkScout"

#: console lines look like ``[INFO] Total URLs found: 12``
CONSOLE_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
FILE_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(message)s"

_LevelT = Union[int, str]


def configure(
    *,
    level: _LevelT = "INFO",
    log_file: str | Path | None = None,
    console_format: str = CONSOLE_FORMAT,
) -> logging.Logger:
    """Install fresh handlers on the project logger and return it.

    Handlers from an earlier call are detached and closed first, so calling
    this twice (as tests do) never duplicates output or leaks a log file.
    With *log_file* every record is also written there, timestamped, in a
    file rotated at 5 MiB with three backups.
    """
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    lg.propagate = False

    for old in list(lg.handlers):
        lg.removeHandler(old)
        old.close()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(console_format))
    lg.addHandler(console)

    if log_file is not None:
        rotating = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        rotating.setFormatter(logging.Formatter(FILE_FORMAT))
        lg.addHandler(rotating)

    return lg


logger: logging.Logger = logging.getLogger(LOGGER_NAME)

__all__ = ["LOGGER_NAME", "configure", "logger"]
