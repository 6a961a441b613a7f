"""Logging setup for the isbn_parser command line."""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "WARNING",
    console_output: bool = True,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """Configure the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        console_output: Log to stderr
        log_file: Optional file to append records to

    Returns:
        The configured root logger
    """
    logger = logging.getLogger()
    logger.handlers.clear()
    logger.setLevel(getattr(logging, log_level.upper()))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.debug("Logging configured at %s", log_level.upper())
    return logger
