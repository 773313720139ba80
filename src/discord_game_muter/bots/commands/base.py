"""
Base command handler class for Discord bot commands.

Handlers share one dispatch boundary: ``_deliver`` applies an outcome's mute
directives, folds any platform failures into the outcome and posts the
rendered reply.
"""

import logging
from typing import Optional

from discord.ext import commands

from discord_game_muter.config.settings import SimpleConfig
from discord_game_muter.core.game_service import GameService
from discord_game_muter.core.prefix_storage import PrefixStorage
from discord_game_muter.core.results import CommandOutcome
from discord_game_muter.bots.utils.embed_builder import EmbedBuilder
from discord_game_muter.bots.utils.permission_utils import NO_MENTIONS
from discord_game_muter.bots.utils.voice_utils import (
    REMOTE_ERRORS,
    VoiceSnapshot,
    VoiceUtils,
)


class BaseCommandHandler:
    """Base class for command handlers with common functionality."""

    def __init__(
        self,
        game_service: Optional[GameService] = None,
        prefix_storage: Optional[PrefixStorage] = None,
        logger: Optional[logging.Logger] = None,
        config: Optional[SimpleConfig] = None,
    ):
        """Initialize the base command handler."""
        self.game_service = game_service
        self.prefix_storage = prefix_storage
        self.logger = logger or logging.getLogger("game_muter")
        self.config = config

    def _voice_snapshot(self, ctx: commands.Context) -> VoiceSnapshot:
        """The snapshot taken by the authorization gate, or a fresh one."""
        snapshot = getattr(ctx, "voice_snapshot", None)
        if snapshot is None:
            snapshot = VoiceUtils.snapshot(ctx.author)
        return snapshot

    async def _deliver(self, ctx: commands.Context, outcome: CommandOutcome) -> None:
        """Apply mute directives, then post the outcome as one reply."""
        if outcome.directives and ctx.guild is not None:
            failed = await VoiceUtils.apply_directives(
                ctx.guild, outcome.directives, self.logger
            )
            if failed:
                self.logger.warning(
                    f"{ctx.command} in guild {ctx.guild.id}: "
                    f"{len(failed)} mute update(s) failed"
                )
            outcome = outcome.with_remote_failures(failed)

        await self._send(ctx, EmbedBuilder.outcome_text(outcome))

    async def _send(self, ctx: commands.Context, content: str) -> None:
        try:
            await ctx.send(content, allowed_mentions=NO_MENTIONS)
        except REMOTE_ERRORS as e:
            self.logger.warning(f"Could not send reply for {ctx.command}: {e}")
