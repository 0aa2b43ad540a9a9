"""
Logging configuration for the application.

``setup_logging`` applies the configured level to the
``expense_tracker_api`` logger hierarchy and, if the process has not
configured logging yet, attaches a console handler (and optionally a
file handler) to the root logger.  When a host such as uvicorn or
pytest has already installed handlers they are left alone and only the
level is applied.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "expense_tracker_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure logging and return the package logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  Only used when the root
        logger has no handlers yet.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return package_logger

    root.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
    return package_logger
