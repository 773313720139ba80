"""
Game command handlers.

Each command runs as one registry transaction: resolve the caller's
session, confirm they still lead it, apply the state transition and return
a ``CommandOutcome`` carrying the mute directives. The outcome is produced
after the lock is released; applying the directives is left to the caller.
"""

from typing import Callable, Collection, Optional

from discord_game_muter.infrastructure.logging import setup_logging
from .results import CommandOutcome
from .session import GameSession, Transition, TransitionStatus
from .session_registry import SessionRegistry
from .types import ChannelId, MemberId

logger = setup_logging(
    component_name="game_service",
    log_file="logs/game_muter.log",
)

NO_SESSION_MESSAGE = "There is no game running in your voice channel."
NOT_LEADER_MESSAGE = "Only the game leader can use this command."


class GameService:
    """Leader-only game operations on a channel's session."""

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    async def _run(
        self,
        channel_id: Optional[ChannelId],
        caller_id: MemberId,
        step: Callable[[GameSession], CommandOutcome],
    ) -> CommandOutcome:
        if channel_id is None:
            return CommandOutcome.authorization_error(
                "You must join a voice channel first."
            )

        async with self.registry.transaction() as txn:
            session = txn.get(channel_id)
            if session is None:
                return CommandOutcome.authorization_error(NO_SESSION_MESSAGE)
            if not session.is_leader(caller_id):
                return CommandOutcome.authorization_error(NOT_LEADER_MESSAGE)
            return step(session)

    async def play(
        self, channel_id: Optional[ChannelId], caller_id: MemberId, roster: Collection[MemberId]
    ) -> CommandOutcome:
        """Mute everyone in the channel."""

        def step(session: GameSession) -> CommandOutcome:
            transition = session.mute_all(roster)
            logger.info(f"Channel {session.channel_id}: play phase ({len(roster)} muted)")
            return CommandOutcome.ok(
                "🤫 Play phase: everyone in the channel is muted.",
                transition.directives,
            )

        return await self._run(channel_id, caller_id, step)

    async def discuss(
        self, channel_id: Optional[ChannelId], caller_id: MemberId, roster: Collection[MemberId]
    ) -> CommandOutcome:
        """Unmute everyone in the channel who is still alive."""

        def step(session: GameSession) -> CommandOutcome:
            transition = session.unmute_all_except_dead(roster)
            logger.info(
                f"Channel {session.channel_id}: discussion phase "
                f"({len(transition.directives)} unmuted)"
            )
            return CommandOutcome.ok(
                "🗣️ Discussion phase: living players are unmuted.",
                transition.directives,
            )

        return await self._run(channel_id, caller_id, step)

    async def kill(
        self,
        channel_id: Optional[ChannelId],
        caller_id: MemberId,
        target_id: MemberId,
        roster: Collection[MemberId],
    ) -> CommandOutcome:
        """Mark ``target_id`` dead and mute them."""

        def step(session: GameSession) -> CommandOutcome:
            if target_id not in roster:
                return CommandOutcome.argument_error(
                    f"<@{target_id}> is not in <#{session.channel_id}>."
                )
            transition = session.kill(target_id)
            if transition.status is TransitionStatus.ALREADY_KILLED:
                return CommandOutcome.ok(f"<@{target_id}> is already killed.")
            logger.info(f"Channel {session.channel_id}: killed {target_id}")
            return CommandOutcome.ok(f"💀 <@{target_id}> was killed.", transition.directives)

        return await self._run(channel_id, caller_id, step)

    async def revive(
        self,
        channel_id: Optional[ChannelId],
        caller_id: MemberId,
        target_id: MemberId,
    ) -> CommandOutcome:
        """Bring ``target_id`` back to life."""

        def step(session: GameSession) -> CommandOutcome:
            transition: Transition = session.revive(target_id)
            if transition.status is TransitionStatus.NOT_KILLED:
                return CommandOutcome.ok(f"<@{target_id}> is not killed.")
            logger.info(f"Channel {session.channel_id}: revived {target_id}")
            return CommandOutcome.ok(f"✨ <@{target_id}> was revived.", transition.directives)

        return await self._run(channel_id, caller_id, step)

    async def reset(
        self, channel_id: Optional[ChannelId], caller_id: MemberId, roster: Collection[MemberId]
    ) -> CommandOutcome:
        """Revive everyone and unmute the whole channel."""

        def step(session: GameSession) -> CommandOutcome:
            transition = session.reset(roster)
            logger.info(f"Channel {session.channel_id}: reset")
            return CommandOutcome.ok(
                "🔄 Game reset: everyone is alive and unmuted.",
                transition.directives,
            )

        return await self._run(channel_id, caller_id, step)
