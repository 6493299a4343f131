"""Logging setup for the literate documentation generator.

Console messages go to stderr in a short format so that command output
on stdout (page listings, ``inspect`` YAML) can be piped cleanly. The
optional log file gets the full timestamped format from config.yaml.
"""

import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_format: str = FILE_FORMAT,
    log_file: Optional[str] = None,
    console_format: str = CONSOLE_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the ``lit_doc`` logger that every module logs under.

    Module loggers are created with ``logging.getLogger(__name__)``, so
    they propagate to this one. Existing handlers are cleared first,
    since the CLI group calls this on every invocation.

    Args:
        level: Logging level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Format string for the log file.
        log_file: Optional file path for log output. If None, logs only
            to the console.
        console_format: Format string for console messages.
        stream: Console stream. Defaults to the current ``sys.stderr``.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger("lit_doc")
    package_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(numeric_level)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(console_format))
    package_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(log_format))
        package_logger.addHandler(file_handler)

    package_logger.debug("Logging initialized at level %s", level)
    return package_logger
