"""
Utility class for building Discord replies consistently.

Command replies are plain text (errors as a quoted block); the help page is
an embed.
"""

from typing import Iterable

import discord

from discord_game_muter.core.results import CommandOutcome, OutcomeKind


class EmbedBuilder:
    """Builds reply text and embeds with consistent styling."""

    @staticmethod
    def quote(text: str) -> str:
        """Render text as a Discord block quote."""
        return "\n".join(f"> {line}" for line in text.splitlines() or [""])

    @staticmethod
    def error_text(message: str) -> str:
        """Create a quoted error block."""
        return EmbedBuilder.quote(f"❌ {message}")

    @staticmethod
    def mentions(member_ids: Iterable[int]) -> str:
        return ", ".join(f"<@{member_id}>" for member_id in member_ids)

    @staticmethod
    def outcome_text(outcome: CommandOutcome) -> str:
        """Render a command outcome as a single reply message."""
        if outcome.kind is OutcomeKind.OK:
            return outcome.message
        if outcome.kind is OutcomeKind.REMOTE_ERROR:
            failed = EmbedBuilder.mentions(outcome.failed_member_ids)
            return (
                f"{outcome.message}\n"
                + EmbedBuilder.quote(f"⚠️ Could not update the voice state of {failed}.")
            )
        return EmbedBuilder.error_text(outcome.message)

    @staticmethod
    def no_permission() -> str:
        return EmbedBuilder.error_text(
            "You need the Manage Server permission to use this command."
        )

    @staticmethod
    def command_error(error_message: str) -> str:
        return EmbedBuilder.error_text(f"Error: {error_message}")

    @staticmethod
    def help_command(prefix: str) -> discord.Embed:
        """Create the help embed for the given command prefix."""
        embed = discord.Embed(
            title="📖 Game Muter - Commands",
            description=(
                "Join a voice channel and use any game command: the first player "
                "to do so becomes the game leader for that channel."
            ),
            color=discord.Color.blue(),
        )

        embed.add_field(
            name="🎮 Game Commands (leader only)",
            value=f"• `{prefix}play` - Mute everyone in the voice channel\n"
            f"• `{prefix}discuss` - Unmute everyone who is still alive\n"
            f"• `{prefix}kill @member` - Mark a player dead and mute them\n"
            f"• `{prefix}revive @member` - Bring a dead player back\n"
            f"• `{prefix}reset` - Revive everyone and unmute the channel",
            inline=False,
        )

        embed.add_field(
            name="👑 Leadership",
            value="• Each voice channel has at most one game leader\n"
            "• When the leader leaves, the next player to use a game command takes over\n"
            "• The game ends when everyone has left the voice channel",
            inline=False,
        )

        embed.add_field(
            name="⚙️ Settings",
            value=f"• `{prefix}prefix` - Show this server's command prefix\n"
            f"• `{prefix}setprefix <prefix>` - Change it (Manage Server permission)\n"
            f"• `{prefix}resetprefix` - Go back to the default prefix (Manage Server permission)\n"
            f"• `{prefix}ping` - Check the bot is alive",
            inline=False,
        )

        embed.set_footer(text=f"Get started: join voice and run {prefix}play")
        return embed
