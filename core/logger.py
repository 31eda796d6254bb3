"""
Service Logger Setup

Configures a named logger from LoggingConfig.
"""

import logging
import sys
from typing import Optional

from core.config import LoggingConfig


def setup_service_logger(
    service_name: str,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create (or reconfigure) the logger for a service

    Args:
        service_name: Logger name, usually the service package name
        level: Optional level override (e.g. "DEBUG")
        config: Logging config (loaded from environment if not provided)

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(service_name)
    logger.setLevel((level or config.log_level).upper())

    # Avoid stacking handlers when called twice for the same service
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        logger.addHandler(console)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["setup_service_logger"]
