"""
Information command handlers: help and ping.
"""

from discord.ext import commands

from discord_game_muter.bots.commands.base import BaseCommandHandler
from discord_game_muter.bots.utils.embed_builder import EmbedBuilder


class InfoCommands(BaseCommandHandler):
    """Handles commands that need no game session."""

    async def help_command(self, ctx: commands.Context) -> None:
        """Show all available commands and their descriptions."""
        await ctx.send(embed=EmbedBuilder.help_command(ctx.clean_prefix))

    async def ping_command(self, ctx: commands.Context) -> None:
        await self._send(ctx, "Pong!")
