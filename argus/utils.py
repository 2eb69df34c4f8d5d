# Argus Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

from argus.console import error_console

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
LOG_MODE_ENV = "ARGUS_LOG_MODE"


def setup_logging(level: int = logging.WARNING, mode: str | None = None) -> logging.Handler:
    """
    Route the `argus` logger to stderr.

    Args:
        level (int): Threshold for the `argus` logger and its handler.
        mode (str | None):
            - "cli": Rich console records (default)
            - "json": one JSON object per record
            Falls back to the `ARGUS_LOG_MODE` environment variable.

    Returns:
        logging.Handler: The installed handler. It replaces any handler already
        attached to the `argus` logger.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv(LOG_MODE_ENV) or "cli"
    if mode == "cli":
        handler: logging.Handler = RichHandler(
            console=error_console,
            show_time=True,
            show_path=False,
            markup=False,
            log_time_format="[%H:%M:%S]",
        )
    elif mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
    else:
        raise ValueError(f"Invalid log mode: {mode}")
    handler.setLevel(level)

    logger = logging.getLogger("argus")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    logger.debug("Logging initialized in '%s' mode.", mode)
    return handler
