"""
Logging setup for BBSKit.

Library modules only create loggers with ``logging.getLogger(__name__)``;
applications call :func:`setup_logger` once to attach handlers.
"""

import logging
import os
from typing import Optional, Union

from . import config


class BBSKitFormatter(logging.Formatter):
    """Unified logging formatter with emoji prefixes for console and plain records for files"""

    LEVEL_EMOJI = {
        logging.DEBUG: "🔍",
        logging.INFO: "ℹ️",
        logging.WARNING: "⚠️",
        logging.ERROR: "❌",
        logging.CRITICAL: "🔴"
    }

    def __init__(self, fmt=None, datefmt=None, use_emoji=True):
        super().__init__(fmt, datefmt)
        self.use_emoji = use_emoji

    def format(self, record):
        """Format log record with emoji prefix and consistent structure"""
        message = super().format(record)
        if self.use_emoji:
            emoji = self.LEVEL_EMOJI.get(record.levelno, "•")
            message = f"{emoji} {message}"
        return message


def setup_logger(
    name: Optional[str] = "bbskit",
    level: Optional[Union[int, str]] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the BBSKit logger with console and optional file handlers.

    Args:
        name: Logger name (defaults to the package logger)
        level: Level as int or name; falls back to BBSKIT_LOG_LEVEL
        log_file: File path; falls back to BBSKIT_LOG_FILE_PATH when
            BBSKIT_LOG_TO_FILE is enabled

    Returns:
        Configured logger
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(BBSKitFormatter(
        fmt='%(asctime)s [%(levelname)-8s] %(message)s',
        datefmt='%H:%M:%S',
        use_emoji=True
    ))
    logger.addHandler(console_handler)

    if log_file is None and config.LOG_TO_FILE:
        log_file = config.LOG_FILE_PATH

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(BBSKitFormatter(
            fmt='%(asctime)s [%(levelname)-8s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S',
            use_emoji=False
        ))
        logger.addHandler(file_handler)

    return logger
