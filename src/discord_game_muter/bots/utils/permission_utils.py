"""
Permission checks for the Discord bot.

Game commands pass through the session authorization gate, installed as a
global check. Settings commands require the Manage Server permission.
"""

import logging

import discord
from discord.ext import commands

from discord_game_muter.core.authorization import AuthorizationGate, CommandRequest
from .voice_utils import REMOTE_ERRORS, VoiceUtils

logger = logging.getLogger("game_muter")

NO_MENTIONS = discord.AllowedMentions.none()


class SessionCheckFailure(commands.CheckFailure):
    """Raised when the authorization gate rejects a command."""

    pass


class PermissionUtils:
    """Utilities for permission checks."""

    @staticmethod
    def is_guild_manager() -> callable:
        """Decorator: Check if user may manage the server."""

        def predicate(ctx: commands.Context) -> bool:
            if ctx.guild is None:
                raise commands.NoPrivateMessage()
            perms = ctx.author.guild_permissions
            return perms.administrator or perms.manage_guild

        return commands.check(predicate)

    @staticmethod
    def session_gate(gate: AuthorizationGate):
        """
        Build the global check that runs the authorization gate.

        The caller's voice state is read once and stored on the context as
        ``voice_snapshot`` so the command handler sees the same roster.
        """

        async def check(ctx: commands.Context) -> bool:
            snapshot = VoiceUtils.snapshot(ctx.author)
            ctx.voice_snapshot = snapshot

            decision = await gate.evaluate(
                CommandRequest(
                    caller_id=ctx.author.id,
                    command_name=ctx.command.qualified_name,
                    text_channel_id=ctx.channel.id,
                    voice_channel_id=snapshot.channel_id,
                )
            )

            if decision.announcement:
                try:
                    await ctx.send(decision.announcement, allowed_mentions=NO_MENTIONS)
                except REMOTE_ERRORS as e:
                    logger.warning(
                        f"Could not announce leadership in channel {ctx.channel.id}: {e}"
                    )
            if not decision.admitted:
                raise SessionCheckFailure(decision.message)
            return True

        return check
