"""
Custom exceptions for the Discord Game Muter bot.

User-facing command failures are reported as ``CommandOutcome`` values, not
exceptions. The classes here cover configuration problems and broken
internal contracts.
"""


class GameMuterError(Exception):
    """Base exception for all Game Muter errors."""

    pass


class ConfigurationError(GameMuterError):
    """Raised when there are configuration-related errors."""

    pass


class ValidationError(ConfigurationError):
    """Raised when a configuration value (e.g. a guild prefix) is invalid."""

    pass


class TokenError(ConfigurationError):
    """Raised when the bot token is missing."""

    pass


class SessionError(GameMuterError):
    """Raised when game session bookkeeping fails."""

    pass


class SessionInvariantError(SessionError):
    """Raised when registry or session invariants are violated."""

    pass
