"""
Logging configuration for the command-line interface.

Library modules only create loggers; handlers are attached here.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.logging import RichHandler


LOGGER_NAMES = ("osu_export", "osu_io")


def setup_logging(level: int = logging.WARNING, log_file: Optional[Path] = None) -> None:
    """
    Route the osu_* loggers to the terminal, and optionally to a file.

    Args:
        level: Logging level for terminal output
        log_file: Optional file receiving DEBUG output
    """
    handlers: list[logging.Handler] = [RichHandler(level=level, show_path=False)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()
        logger.setLevel(logging.DEBUG if log_file else level)
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False
