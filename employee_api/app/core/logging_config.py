"""
Logging setup for the API process.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger and applies the configured level both to
the root logger and to uvicorn's own loggers, so ``LOG_LEVEL`` also
governs the server's access and error output.  Handlers are only
installed once; the level is applied on every call.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn; they do not inherit the root level.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value, defaulting to ``INFO``."""
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and server loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"info"``).  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to in addition to the console.  Relative
        paths are resolved against the current working directory.
    """
    numeric_level = resolve_level(level)
    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    if root.handlers:
        # Already configured (tests, repeated ``create_app`` calls, or a
        # server that installed its own handlers).
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
