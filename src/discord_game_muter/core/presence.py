"""
Presence reactor: keeps game sessions in step with voice membership.

Leave and join notifications arrive independently of commands. Each one is
applied as a single registry transaction; the resulting announcements and
unmute decisions are returned so the bot layer can perform the Discord
calls after the lock is released.
"""

from dataclasses import dataclass, field
from typing import Iterable, List

from discord_game_muter.infrastructure.logging import setup_logging
from .session_registry import SessionRegistry
from .types import ChannelId, MemberId

logger = setup_logging(
    component_name="presence_reactor",
    log_file="logs/game_muter.log",
)


@dataclass(frozen=True)
class Announcement:
    """A status message for a session's most recent text channel."""

    text_channel_id: ChannelId
    message: str


@dataclass
class LeaveResult:
    session_found: bool = False
    leader_vacated: bool = False
    cleared_dead: bool = False
    session_closed: bool = False
    announcements: List[Announcement] = field(default_factory=list)


@dataclass(frozen=True)
class JoinResult:
    game_muted: bool
    unmute: bool


class PresenceReactor:
    """Applies voice join/leave events to the session registry."""

    def __init__(self, registry: SessionRegistry):
        self.registry = registry

    async def member_left(
        self,
        channel_id: ChannelId,
        member_id: MemberId,
        remaining_roster: Iterable[MemberId],
    ) -> LeaveResult:
        """
        Handle ``member_id`` leaving ``channel_id``.

        Args:
            channel_id: Voice channel the member left
            member_id: The departing member
            remaining_roster: Members still in the channel after the departure
        """
        remaining = [m for m in remaining_roster if m != member_id]
        result = LeaveResult()

        async with self.registry.transaction() as txn:
            session = txn.get(channel_id)
            if session is None:
                return result

            result.session_found = True
            text_channel_id = session.last_text_channel_id

            if session.is_leader(member_id):
                session.vacate_leadership()
                result.leader_vacated = True
                result.announcements.append(
                    Announcement(
                        text_channel_id,
                        f"🚪 <@{member_id}> left <#{channel_id}>. The game has no "
                        "leader; the next member to use a game command takes over.",
                    )
                )

            result.cleared_dead = session.forget_member(member_id)

            if not remaining:
                txn.remove(channel_id)
                result.session_closed = True
                result.announcements.append(
                    Announcement(
                        text_channel_id,
                        f"🛑 Everyone left <#{channel_id}>. The game has ended.",
                    )
                )

        logger.debug(
            f"Member {member_id} left channel {channel_id}: "
            f"vacated={result.leader_vacated} cleared_dead={result.cleared_dead} "
            f"closed={result.session_closed}"
        )
        return result

    async def member_joined(
        self,
        channel_id: ChannelId,
        member_id: MemberId,
        server_muted: bool,
    ) -> JoinResult:
        """
        Decide whether a member joining ``channel_id`` should be unmuted.

        A joiner keeps a server mute only if the channel's game is in its
        play phase.
        """
        async with self.registry.transaction() as txn:
            session = txn.get(channel_id)
            game_muted = session is not None and session.game_muted

        unmute = server_muted and not game_muted
        if unmute:
            logger.debug(
                f"Member {member_id} joined channel {channel_id} muted; lifting mute"
            )
        return JoinResult(game_muted=game_muted, unmute=unmute)
