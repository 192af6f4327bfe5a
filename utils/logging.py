"""
Centralized logging configuration for the Lumania plugin utilities.

Library components (config stores, the SQL runner) never configure logging
themselves. They take an injected logger and fall back to a module logger, so
handlers are attached once, here, by whichever entry point owns the process.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLUGIN_LOGGER_NAME = "lumania"


# Minimal fallback values only if config unavailable
class _FallbackConfig:
    LOG_LEVEL = "INFO"
    LOG_FILE = "logs/lumania.log"
    LOG_MAX_BYTES = 5 * 1024 * 1024
    LOG_BACKUP_COUNT = 3


def _settings():
    """Return the project settings, or fallback values if they cannot be loaded."""
    try:
        from config.settings import config
    except Exception:
        return _FallbackConfig()
    return config


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _attach_file_handler(
    logger: logging.Logger,
    log_file: str,
    max_bytes: int,
    backup_count: int,
    formatter: logging.Formatter,
) -> bool:
    """Attach a rotating file handler. Returns False if the file cannot be opened."""
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
    except OSError as e:
        logger.warning(f"Failed to setup file logging to {log_file}: {e}")
        return False

    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return True


def setup_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    logger_name: str | None = None,
    max_bytes: int | None = None,
    backup_count: int | None = None,
) -> logging.Logger:
    """
    Configure a logger with console output and a rotating log file.

    Calling this again for the same logger replaces its handlers rather than
    adding more. If the log file cannot be opened the logger keeps console
    output only.

    Args:
        log_level (str, optional): Logging level (e.g., 'INFO', 'DEBUG').
                                 If None, uses config.LOG_LEVEL
        log_file (str, optional): Path to log file. If None, uses config.LOG_FILE
                                for the plugin logger and logs/<name>.log otherwise
        logger_name (str, optional): Name for the logger. If None, uses root logger
        max_bytes (int, optional): Maximum bytes before rotation. If None, uses config.LOG_MAX_BYTES
        backup_count (int, optional): Rotated files to keep. If None, uses config.LOG_BACKUP_COUNT

    Returns:
        logging.Logger: Configured logger instance

    Example:
        >>> from utils.logging import setup_logging
        >>> logger = setup_logging('DEBUG', 'logs/startup.log', 'startup')
        >>> logger.debug("Opening database.yml")
    """
    settings = _settings()
    log_level = (log_level or settings.LOG_LEVEL).upper()
    if max_bytes is None:
        max_bytes = settings.LOG_MAX_BYTES
    if backup_count is None:
        backup_count = settings.LOG_BACKUP_COUNT
    if log_file is None:
        if logger_name == PLUGIN_LOGGER_NAME:
            log_file = settings.LOG_FILE
        else:
            log_file = os.path.join("logs", f"{logger_name or 'default'}.log")

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, log_level))
    _reset_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if _attach_file_handler(logger, log_file, max_bytes, backup_count, formatter):
        logger.debug(f"Logging configured - Level: {log_level}, File: {log_file}")
    else:
        logger.info("Continuing with console logging only")

    return logger


def setup_plugin_logging(log_level: str | None = None) -> logging.Logger:
    """
    Set up the 'lumania' logger shared by the plugin's components.

    Module loggers under 'lumania.' propagate to it, so components that were
    not handed a logger still reach the same handlers.
    """
    return setup_logging(log_level=log_level, logger_name=PLUGIN_LOGGER_NAME)
