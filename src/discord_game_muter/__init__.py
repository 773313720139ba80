"""
Discord Game Muter - voice channel mute control for social deduction games.

One player per voice channel leads the game and switches everyone between
the play phase (all muted) and the discussion phase (living players
unmuted), killing and reviving players along the way.

Architecture:
- Core: Sessions, registry, authorization gate, presence reactor, handlers
- Bots: discord.py wiring, commands and event handlers
- Config: Environment-based configuration
- Infrastructure: Logging and exceptions
"""

__version__ = "1.0.0"
__author__ = "Discord Game Muter Team"

# Core components
from .core.session import GameSession
from .core.session_registry import SessionRegistry
from .core.authorization import AuthorizationGate
from .core.presence import PresenceReactor
from .core.game_service import GameService
from .core.prefix_storage import PrefixStorage
from .core.results import CommandOutcome, OutcomeKind

# Configuration
from .config.settings import SimpleConfig

# Infrastructure
from .infrastructure.logging import setup_logging, get_logger
from .infrastructure.exceptions import (
    GameMuterError,
    ConfigurationError,
    SessionError,
    SessionInvariantError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Core components
    "GameSession",
    "SessionRegistry",
    "AuthorizationGate",
    "PresenceReactor",
    "GameService",
    "PrefixStorage",
    "CommandOutcome",
    "OutcomeKind",
    # Configuration
    "SimpleConfig",
    # Infrastructure
    "setup_logging",
    "get_logger",
    "GameMuterError",
    "ConfigurationError",
    "SessionError",
    "SessionInvariantError",
]
