"""Logging configuration for the server and headless runs.

Everything under the ``delve`` namespace logs at the requested level.
Server libraries stay at WARNING unless DEBUG is asked for, so a busy
client polling ``/state`` does not bury turn messages in access lines.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "fastapi", "asyncio")


def setup_logging(level: str = "INFO", overrides: dict[str, str] | None = None) -> logging.Logger:
    """Install one stdout handler on the root logger and return the ``delve`` logger.

    *overrides* maps logger names to level names, e.g. ``{"delve.ai": "DEBUG"}``.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    delve_logger = logging.getLogger("delve")
    delve_logger.setLevel(numeric_level)

    third_party = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party)

    for name, name_level in (overrides or {}).items():
        logging.getLogger(name).setLevel(name_level.upper())

    delve_logger.debug("Logging configured at %s", logging.getLevelName(numeric_level))
    return delve_logger
