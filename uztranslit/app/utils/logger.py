"""
Logging setup for uztranslit.

The console handler writes to stderr: the CLI streams transliterated text
on stdout, and log lines must never end up inside that output.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import LoggingConfig, get_config


def setup_logging(
    name: str = "uztranslit",
    level: Optional[str] = None,
    log_config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        name: Logger to configure
        level: Overrides the configured level (e.g. "DEBUG" for --verbose)
            without changing the shared config
        log_config: Logging section to use instead of the loaded config's
    """
    if log_config is None:
        log_config = get_config().logging

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or log_config.level).upper()))
    logger.handlers.clear()

    formatter = logging.Formatter(log_config.format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_config.file_path:
        log_path = Path(log_config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=log_config.max_bytes,
            backupCount=log_config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"uztranslit.{name}")
