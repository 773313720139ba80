"""
Discord bot implementation for the Game Muter.

This package contains the discord.py wiring:
- bot_core: builds the bot and wires components together
- commands: command handlers
- handlers: Discord event handlers
- utils: replies, voice helpers and permission checks
"""

from .bot_core import GameMuterBot, get_bot_instance

__all__ = [
    "GameMuterBot",
    "get_bot_instance",
]
