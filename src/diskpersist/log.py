"""Logging configuration for diskpersist.

Library modules log through ``logging.getLogger(__name__)``, so records land
under the ``diskpersist`` logger and stay silent unless an application
configures it, either itself or with :func:`setup_logging`.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "diskpersist"

console = Console(stderr=True)


class JSONFormatter(logging.Formatter):
    """JSON lines log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(
    log_file: Path | None = None,
    verbose: bool = False,
    level: int = logging.INFO,
) -> logging.Logger:
    """Configure the ``diskpersist`` logger.

    Args:
        log_file: Write records to this file; JSON lines when it ends in ``.json``.
        verbose: Also print records to the console through rich.
        level: Minimum level for the logger and its handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    close_logging()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(level)
        if log_file.suffix == ".json":
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        logger.addHandler(file_handler)

    if verbose:
        console_handler = RichHandler(console=console, show_time=False, show_path=False)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

    return logger


def close_logging() -> None:
    """Detach and close every handler installed on the ``diskpersist`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


__all__ = ["JSONFormatter", "close_logging", "console", "setup_logging"]
