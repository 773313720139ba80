"""
Command handlers for the Discord bot.

This package contains all command handlers organized by functionality:
- game_commands: Leader-only game commands (play, discuss, kill, revive, reset)
- setup_commands: Per-server prefix configuration
- info_commands: Help and ping
- base: Base class with the shared reply boundary
"""

from .base import BaseCommandHandler
from .game_commands import GameCommands
from .setup_commands import SetupCommands
from .info_commands import InfoCommands

__all__ = ["BaseCommandHandler", "GameCommands", "SetupCommands", "InfoCommands"]
