"""
Logger configuration.

Provides a stdout logger with ISO timestamps for the job store and updater.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root logger level name or number (e.g. "DEBUG", logging.INFO)
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    # SQL echo is controlled by DatabaseSettings.echo_sql
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get configured logger.

    Args:
        name: Logger name (usually __name__)

    Returns:
        logging.Logger: Configured logger instance
    """
    return logging.getLogger(name)
