"""
Centralized logging entry points for the Discord Game Muter bot.

Every module obtains its logger through ``setup_logging`` so that the YAML
configuration and environment-based levels apply uniformly.
"""

import logging
from typing import Optional

from .logging_manager import setup_logging as _setup_logging, get_logger as _get_logger


def setup_logging(
    component_name: str,
    log_level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Set up logging for a bot component.

    Args:
        component_name: Name of the component (e.g. 'game_muter', 'presence')
        log_level: Logging level override. If None, uses the environment level:
                  Development=DEBUG, Staging=INFO, Production=WARNING
        log_file: Log file used when no YAML configuration is available

    Returns:
        logging.Logger: Configured logger instance
    """
    return _setup_logging(component_name, log_level, log_file)


def get_logger(component_name: str) -> logging.Logger:
    """Get a logger for a specific component without reconfiguring it."""
    return _get_logger(component_name)
