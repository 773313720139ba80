"""
Game command handlers: play, discuss, kill, revive and reset.

By the time these run the authorization gate has admitted the caller as
leader of their voice channel's session.
"""

from typing import Optional, Tuple

import discord
from discord.ext import commands

from discord_game_muter.bots.commands.base import BaseCommandHandler
from discord_game_muter.core.results import CommandOutcome


class GameCommands(BaseCommandHandler):
    """Handles the leader-only game commands."""

    async def play_command(self, ctx: commands.Context) -> None:
        """Mute everyone in the voice channel."""
        snapshot = self._voice_snapshot(ctx)
        outcome = await self.game_service.play(
            snapshot.channel_id, ctx.author.id, snapshot.roster
        )
        await self._deliver(ctx, outcome)

    async def discuss_command(self, ctx: commands.Context) -> None:
        """Unmute everyone in the voice channel who is alive."""
        snapshot = self._voice_snapshot(ctx)
        outcome = await self.game_service.discuss(
            snapshot.channel_id, ctx.author.id, snapshot.roster
        )
        await self._deliver(ctx, outcome)

    async def kill_command(self, ctx: commands.Context, target: str = "") -> None:
        """Mark a member dead and mute them."""
        member, error = await self._resolve_target(ctx, target, "kill")
        if error is not None:
            await self._deliver(ctx, error)
            return

        snapshot = self._voice_snapshot(ctx)
        outcome = await self.game_service.kill(
            snapshot.channel_id, ctx.author.id, member.id, snapshot.roster
        )
        await self._deliver(ctx, outcome)

    async def revive_command(self, ctx: commands.Context, target: str = "") -> None:
        """Bring a dead member back."""
        member, error = await self._resolve_target(ctx, target, "revive")
        if error is not None:
            await self._deliver(ctx, error)
            return

        snapshot = self._voice_snapshot(ctx)
        outcome = await self.game_service.revive(
            snapshot.channel_id, ctx.author.id, member.id
        )
        await self._deliver(ctx, outcome)

    async def reset_command(self, ctx: commands.Context) -> None:
        """Revive everyone and unmute the channel."""
        snapshot = self._voice_snapshot(ctx)
        outcome = await self.game_service.reset(
            snapshot.channel_id, ctx.author.id, snapshot.roster
        )
        await self._deliver(ctx, outcome)

    async def _resolve_target(
        self, ctx: commands.Context, target: str, verb: str
    ) -> Tuple[Optional[discord.Member], Optional[CommandOutcome]]:
        """Turn a mention (or name/id) into a guild member."""
        target = target.strip()
        if not target:
            return None, CommandOutcome.argument_error(
                f"Mention the member to {verb}, e.g. `{ctx.clean_prefix}{verb} @player`."
            )
        try:
            member = await commands.MemberConverter().convert(ctx, target)
        except commands.BadArgument:
            return None, CommandOutcome.argument_error(
                f"Could not find a member matching `{discord.utils.escape_markdown(target)}`."
            )
        return member, None
