"""Logging configuration helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Loggers of the aiohttp client machinery used by HttpTransport.
NETWORK_LOGGERS = ("aiohttp.client", "aiohttp.internal")


def configure_logging(
    level: str = "INFO", *, log_path: Optional[Path] = None, log_network: bool = False
) -> None:
    """Configure logging for command-line use.

    ``level`` applies to this package's loggers. Request-level chatter from
    aiohttp is kept at WARNING unless ``log_network`` is set, in which case it
    is logged at DEBUG alongside the package's own request logging. When
    ``log_path`` is given, records are also appended to that file.
    """

    package_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger("nabaztag").setLevel(package_level)

    if log_path:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)

    network_level = logging.DEBUG if log_network else logging.WARNING
    for name in NETWORK_LOGGERS:
        logging.getLogger(name).setLevel(network_level)
