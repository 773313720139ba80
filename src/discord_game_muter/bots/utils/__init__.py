"""
Utilities for the Discord bot layer.
"""

from .embed_builder import EmbedBuilder
from .permission_utils import NO_MENTIONS, PermissionUtils, SessionCheckFailure
from .voice_utils import REMOTE_ERRORS, VoiceSnapshot, VoiceUtils

__all__ = [
    "EmbedBuilder",
    "NO_MENTIONS",
    "PermissionUtils",
    "REMOTE_ERRORS",
    "SessionCheckFailure",
    "VoiceSnapshot",
    "VoiceUtils",
]
