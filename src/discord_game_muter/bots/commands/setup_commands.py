"""
Server setup command handlers: viewing and changing the command prefix.
"""

from discord.ext import commands

from discord_game_muter.bots.commands.base import BaseCommandHandler
from discord_game_muter.core.results import CommandOutcome
from discord_game_muter.infrastructure.exceptions import ValidationError


class SetupCommands(BaseCommandHandler):
    """Handles per-server configuration commands."""

    async def prefix_command(self, ctx: commands.Context) -> None:
        """Show the command prefix used in this server."""
        guild_id = ctx.guild.id if ctx.guild else None
        prefix = self.prefix_storage.get_prefix(guild_id)
        await self._send(ctx, f"The command prefix here is `{prefix}`.")

    async def set_prefix_command(self, ctx: commands.Context, prefix: str = "") -> None:
        """Change the command prefix for this server."""
        try:
            record = self.prefix_storage.set_prefix(ctx.guild.id, prefix)
        except ValidationError as e:
            await self._deliver(ctx, CommandOutcome.argument_error(str(e)))
            return

        self.logger.info(
            f"{ctx.author} changed the prefix of guild {ctx.guild.id} to '{record.prefix}'"
        )
        await self._deliver(
            ctx,
            CommandOutcome.ok(f"✅ Command prefix set to `{record.prefix}`."),
        )

    async def reset_prefix_command(self, ctx: commands.Context) -> None:
        """Go back to the default command prefix for this server."""
        if not self.prefix_storage.reset_prefix(ctx.guild.id):
            await self._deliver(
                ctx,
                CommandOutcome.argument_error(
                    "This server already uses the default prefix."
                ),
            )
            return

        default = self.prefix_storage.get_prefix(ctx.guild.id)
        self.logger.info(f"{ctx.author} reset the prefix of guild {ctx.guild.id}")
        await self._deliver(
            ctx,
            CommandOutcome.ok(f"✅ Command prefix reset to `{default}`."),
        )
