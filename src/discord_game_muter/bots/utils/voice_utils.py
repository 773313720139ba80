"""
Voice helpers: roster snapshots and applying mute directives.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import discord

from discord_game_muter.core.results import MuteDirective

# Failures of a single Discord call that leave the bot running
REMOTE_ERRORS = (discord.HTTPException, OSError, asyncio.TimeoutError)


@dataclass(frozen=True)
class VoiceSnapshot:
    """A member's voice channel and its roster, read once."""

    channel_id: Optional[int] = None
    roster: Tuple[int, ...] = ()


class VoiceUtils:
    """Reads voice state from the Discord cache and applies mutes."""

    @staticmethod
    def snapshot(member: discord.abc.User) -> VoiceSnapshot:
        """Take the member's current voice channel and roster in one read."""
        voice = getattr(member, "voice", None)
        channel = voice.channel if voice else None
        if channel is None:
            return VoiceSnapshot()
        return VoiceSnapshot(
            channel_id=channel.id,
            roster=tuple(m.id for m in channel.members),
        )

    @staticmethod
    async def apply_directives(
        guild: discord.Guild,
        directives: Sequence[MuteDirective],
        logger: logging.Logger,
    ) -> List[int]:
        """
        Apply mute directives concurrently.

        Returns:
            Ids of members whose mute state could not be changed
        """

        async def apply(directive: MuteDirective) -> Optional[int]:
            member = guild.get_member(directive.member_id)
            if member is None:
                logger.warning(
                    f"Member {directive.member_id} not found in guild {guild.id}"
                )
                return directive.member_id
            try:
                await member.edit(mute=directive.mute)
            except REMOTE_ERRORS as e:
                logger.warning(
                    f"Failed to {'mute' if directive.mute else 'unmute'} "
                    f"{member.display_name} ({member.id}): {e}"
                )
                return directive.member_id
            return None

        results = await asyncio.gather(*(apply(d) for d in directives))
        return [member_id for member_id in results if member_id is not None]
