"""
Logging helpers shared by the service, the CLI and the model code.
"""

import logging
import sys
from typing import Any

from charlm.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_ROOT_NAME = "charlm"


def setup_logger(name: str = _ROOT_NAME, level: str | None = None) -> logging.Logger:
    """
    Get a logger with a single stream handler attached.

    Args:
        name: Logger name (usually __name__)
        level: Level name, defaults to settings.LOG_LEVEL

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def _format(message: str, fields: dict[str, Any]) -> str:
    if not fields:
        return message
    context = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{message} | {context}"


def log_debug(message: str, **fields: Any) -> None:
    setup_logger().debug(_format(message, fields))


def log_info(message: str, **fields: Any) -> None:
    setup_logger().info(_format(message, fields))


def log_warning(message: str, **fields: Any) -> None:
    setup_logger().warning(_format(message, fields))


def log_error(message: str, exc_info: bool = False, **fields: Any) -> None:
    setup_logger().error(_format(message, fields), exc_info=exc_info)
