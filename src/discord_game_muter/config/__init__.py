"""
Configuration management for the Discord Game Muter bot.
"""

from .settings import SimpleConfig, SimpleConfigManager, config_manager

__all__ = [
    "SimpleConfig",
    "SimpleConfigManager",
    "config_manager",
]
