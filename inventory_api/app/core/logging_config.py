"""
Logging configuration for the application.

``setup_logging`` installs a console handler on the root logger and,
when a log file is configured, a size-rotated file handler.  It is a
no-op once the root logger has handlers, so calling ``create_app``
repeatedly (as the tests do) does not duplicate output.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation limits for the optional log file.
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 3


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, debug: bool = False) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  Rotated at ``LOG_FILE_MAX_BYTES``.
    debug : bool
        Forces ``DEBUG`` regardless of ``level``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
