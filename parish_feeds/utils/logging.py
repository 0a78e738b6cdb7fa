"""Logging configuration utilities.

Provides a single function to initialize the root logger with a consistent
format for both interactive use of the CLI and long-running callers that
write to a log file.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Literal, Optional

LOG_LEVEL = os.environ.get("FEEDS_LOG_LEVEL", "INFO").upper()
LOG_OUTPUT = os.environ.get("FEEDS_LOG_OUTPUT", "stdout").lower()
LOG_FILE_PATH = os.environ.get("FEEDS_LOG_FILE_PATH", "logs/parish-feeds.log")
LOG_FORMAT = os.environ.get("FEEDS_LOG_FORMAT", "text").lower()

LogOutput = Literal["stdout", "file", "both"]
LogFormat = Literal["text", "json"]

_TEXT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(filename)s:%(lineno)d | %(message)s"
_JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", '
    '"file": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)


def configure_logging(
    level: str | int | None = None,
    output: LogOutput | None = None,
    file_path: str | None = None,
    log_format: LogFormat | None = None,
    module: Optional[str] = None,
    library_level: str | int = "WARNING",
) -> None:
    """Configure application logging.

    Parameters
    ----------
    level:
        Logging level as a string (e.g., "INFO") or numeric value.
    output:
        Logging output destination: "stdout", "file", or "both".
    file_path:
        Path to the log file if output is "file" or "both".
    log_format:
        Logging format: "text" or "json".
    module:
        Logger namespace that receives ``level`` (the CLI passes "feeds").
        When given, the root logger is held at ``library_level`` so
        third-party loggers such as urllib3 stay quiet at DEBUG.
    library_level:
        Root logger level used when ``module`` is set.
    """
    # Resolved at call time so a .env loaded by the CLI is respected
    if level is None:
        level = os.environ.get("FEEDS_LOG_LEVEL", LOG_LEVEL).upper()
    if log_format is None:
        log_format = (os.environ.get("FEEDS_LOG_FORMAT") or LOG_FORMAT).lower()
    if output is None:
        output = (os.environ.get("FEEDS_LOG_OUTPUT") or LOG_OUTPUT).lower()
    if file_path is None:
        file_path = os.environ.get("FEEDS_LOG_FILE_PATH") or LOG_FILE_PATH

    root_logger = logging.getLogger()
    root_logger.setLevel(library_level if module else level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(_TEXT_FORMAT if log_format == "text" else _JSON_FORMAT)

    if output in ("stdout", "both"):
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setFormatter(formatter)
        root_logger.addHandler(stdout_handler)

    if output in ("file", "both"):
        log_dir = os.path.dirname(file_path)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(file_path, maxBytes=1024 * 1024, backupCount=3)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    if module:
        logging.getLogger(module).setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
