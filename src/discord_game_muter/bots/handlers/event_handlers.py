"""
Event handlers for the Discord bot.

Voice state updates are split into leave and join notifications for the
presence reactor. Command errors are rendered here as quoted error blocks;
no single failure is allowed to stop the bot.
"""

import logging
from typing import Any, Optional

import discord
from discord.ext import commands

from discord_game_muter.bots.utils.embed_builder import EmbedBuilder
from discord_game_muter.bots.utils.permission_utils import (
    NO_MENTIONS,
    SessionCheckFailure,
)
from discord_game_muter.bots.utils.voice_utils import REMOTE_ERRORS
from discord_game_muter.core.presence import Announcement, PresenceReactor
from discord_game_muter.infrastructure.logging_manager import is_production


class EventHandlers:
    """Handles all Discord bot events."""

    def __init__(
        self,
        bot: Any,
        presence_reactor: PresenceReactor,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize event handlers."""
        self.bot_instance = bot  # The GameMuterBot instance
        self.bot = bot.bot  # The discord.py bot
        self.presence_reactor = presence_reactor
        self.logger = logger or logging.getLogger("game_muter")

    async def on_ready(self) -> None:
        """Bot ready event."""
        self.logger.info(f"Game Muter online: {self.bot.user}")
        activity_name = self.bot_instance.config.activity_name
        try:
            await self.bot.change_presence(activity=discord.Game(name=activity_name))
        except Exception as e:
            self.logger.error(f"Failed to set activity: {e}", exc_info=True)

    async def on_message(self, message: discord.Message) -> None:
        """Message event handler."""
        if not message.author.bot:
            await self.bot.process_commands(message)

    async def on_command_error(self, ctx: commands.Context, error: Exception) -> None:
        """Render a failed command as a quoted error block."""
        if isinstance(error, commands.CommandNotFound):
            return

        if isinstance(error, SessionCheckFailure):
            content = EmbedBuilder.error_text(str(error))
        elif isinstance(error, commands.NoPrivateMessage):
            content = EmbedBuilder.error_text("This command only works in a server.")
        elif isinstance(error, commands.CheckFailure):
            content = EmbedBuilder.no_permission()
        elif isinstance(error, commands.UserInputError):
            content = EmbedBuilder.error_text(
                f"{error} Usage: `{ctx.clean_prefix}{ctx.command} {ctx.command.signature}`"
            )
        else:
            original = getattr(error, "original", error)
            self.logger.error(
                f"Command error in {getattr(ctx, 'command', None)}: {original}",
                exc_info=original,
            )
            if is_production():
                content = EmbedBuilder.command_error(
                    "Something went wrong. Please try again."
                )
            else:
                content = EmbedBuilder.command_error(str(original))

        try:
            await ctx.send(content, allowed_mentions=NO_MENTIONS)
        except REMOTE_ERRORS as send_error:
            self.logger.error(
                f"Command error in {getattr(ctx, 'command', None)}: {error}"
            )
            self.logger.error(f"Failed to send error message: {send_error}")

    async def on_voice_state_update(
        self,
        member: discord.Member,
        before: discord.VoiceState,
        after: discord.VoiceState,
    ) -> None:
        """Route channel changes to the presence reactor."""
        before_channel = before.channel
        after_channel = after.channel
        if before_channel is not None and after_channel is not None:
            if before_channel.id == after_channel.id:
                return  # mute/deafen/stream change, not a move

        if before_channel is not None:
            try:
                await self._handle_leave(member, before_channel)
            except Exception as e:
                self.logger.error(
                    f"Error handling member {member.id} leaving channel "
                    f"{before_channel.id}: {e}",
                    exc_info=True,
                )

        if after_channel is not None:
            try:
                await self._handle_join(member, after_channel, after)
            except Exception as e:
                self.logger.error(
                    f"Error handling member {member.id} joining channel "
                    f"{after_channel.id}: {e}",
                    exc_info=True,
                )

    async def _handle_leave(
        self, member: discord.Member, channel: discord.abc.GuildChannel
    ) -> None:
        remaining = [m.id for m in channel.members]
        result = await self.presence_reactor.member_left(channel.id, member.id, remaining)
        for announcement in result.announcements:
            await self._announce(announcement)

    async def _handle_join(
        self,
        member: discord.Member,
        channel: discord.abc.GuildChannel,
        state: discord.VoiceState,
    ) -> None:
        result = await self.presence_reactor.member_joined(
            channel.id, member.id, state.mute
        )
        if not result.unmute:
            return
        try:
            await member.edit(mute=False)
        except REMOTE_ERRORS as e:
            self.logger.warning(
                f"Failed to unmute {member.display_name} ({member.id}) "
                f"on joining channel {channel.id}: {e}"
            )

    async def _announce(self, announcement: Announcement) -> None:
        channel = self.bot.get_channel(announcement.text_channel_id)
        if channel is None:
            self.logger.warning(
                f"Announcement channel {announcement.text_channel_id} not found"
            )
            return
        try:
            await channel.send(announcement.message, allowed_mentions=NO_MENTIONS)
        except REMOTE_ERRORS as e:
            self.logger.warning(
                f"Could not announce in channel {announcement.text_channel_id}: {e}"
            )
