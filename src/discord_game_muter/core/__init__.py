"""
Core components for the Discord Game Muter bot.

This package holds the platform-independent game logic: sessions and their
transitions, the registry, the authorization gate, the presence reactor,
the command handlers and prefix persistence.
"""

from .authorization import AuthorizationGate, CommandRequest, GateDecision, GateVerdict
from .game_service import GameService
from .prefix_storage import PrefixStorage, GuildPrefix, validate_prefix
from .presence import Announcement, JoinResult, LeaveResult, PresenceReactor
from .results import CommandOutcome, MuteDirective, OutcomeKind
from .session import GameSession, Transition, TransitionStatus
from .session_registry import RegistryTransaction, SessionRegistry

__all__ = [
    "AuthorizationGate",
    "CommandRequest",
    "GateDecision",
    "GateVerdict",
    "GameService",
    "PrefixStorage",
    "GuildPrefix",
    "validate_prefix",
    "Announcement",
    "JoinResult",
    "LeaveResult",
    "PresenceReactor",
    "CommandOutcome",
    "MuteDirective",
    "OutcomeKind",
    "GameSession",
    "Transition",
    "TransitionStatus",
    "RegistryTransaction",
    "SessionRegistry",
]
