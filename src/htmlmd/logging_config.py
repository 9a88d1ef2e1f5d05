"""Logging setup for the htmlmd command."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "htmlmd"

# Console records stay short; the file handler gets timestamps
CONSOLE_FORMAT = "%(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the htmlmd logger.

    Records go to stderr, leaving stdout to the Markdown output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file that also receives records, written as UTF-8
        format_string: Format used for both handlers instead of the defaults
        force: If True, replace handlers installed by an earlier call

    Returns:
        The package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(format_string or CONSOLE_FORMAT))
        logger.addHandler(console_handler)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(format_string or FILE_FORMAT))
            logger.addHandler(file_handler)

    logger.propagate = False
    return logger
