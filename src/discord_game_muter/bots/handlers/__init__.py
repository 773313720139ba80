"""
Discord event handlers.
"""

from .event_handlers import EventHandlers

__all__ = ["EventHandlers"]
