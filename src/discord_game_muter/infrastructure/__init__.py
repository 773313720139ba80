"""
Infrastructure components for the Discord Game Muter bot.

This package contains cross-cutting concerns:
- Logging configuration with environment-based production controls
- Custom exception definitions
"""

from .logging import setup_logging, get_logger
from .logging_manager import (
    LoggingManager,
    LogLevel,
    Environment,
    is_production,
    get_environment,
)
from .exceptions import (
    GameMuterError,
    ConfigurationError,
    ValidationError,
    TokenError,
    SessionError,
    SessionInvariantError,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "LoggingManager",
    "LogLevel",
    "Environment",
    "is_production",
    "get_environment",
    # Exceptions
    "GameMuterError",
    "ConfigurationError",
    "ValidationError",
    "TokenError",
    "SessionError",
    "SessionInvariantError",
]
