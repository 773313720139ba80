"""
Authorization gate for game commands.

The gate runs once per inbound command before its handler. It decides,
under the registry lock, whether the caller is (or becomes) the leader of
the game session bound to their current voice channel.

The caller's voice channel is passed in as a snapshot taken when the
command arrived; the gate never re-reads platform state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, Optional

from discord_game_muter.infrastructure.logging import setup_logging
from .session_registry import SessionRegistry
from .types import ChannelId, MemberId, NO_VOICE_COMMANDS

logger = setup_logging(
    component_name="authorization_gate",
    log_file="logs/game_muter.log",
)


class GateVerdict(Enum):
    """How the gate resolved a command."""

    UNGATED = "ungated"
    LEADER = "leader"
    CREATED = "created"
    CLAIMED = "claimed"
    NOT_IN_VOICE = "not_in_voice"
    LEADER_HELD = "leader_held"


ADMITTING_VERDICTS = frozenset(
    {GateVerdict.UNGATED, GateVerdict.LEADER, GateVerdict.CREATED, GateVerdict.CLAIMED}
)


@dataclass(frozen=True)
class CommandRequest:
    """Snapshot of an inbound command as seen by the gate."""

    caller_id: MemberId
    command_name: str
    text_channel_id: ChannelId
    voice_channel_id: Optional[ChannelId] = None


@dataclass(frozen=True)
class GateDecision:
    """The gate's verdict, with the announcement to post if any."""

    verdict: GateVerdict
    message: str = ""
    announcement: Optional[str] = None
    leader_id: Optional[MemberId] = None

    @property
    def admitted(self) -> bool:
        return self.verdict in ADMITTING_VERDICTS


class AuthorizationGate:
    """Admits, promotes or rejects callers against session leadership."""

    def __init__(
        self,
        registry: SessionRegistry,
        no_voice_commands: Iterable[str] = NO_VOICE_COMMANDS,
    ):
        self.registry = registry
        self.no_voice_commands: FrozenSet[str] = frozenset(no_voice_commands)

    async def evaluate(self, request: CommandRequest) -> GateDecision:
        """Decide whether ``request`` may run."""
        if request.command_name in self.no_voice_commands:
            return GateDecision(GateVerdict.UNGATED)

        if request.voice_channel_id is None:
            logger.debug(
                f"Rejected {request.command_name} from {request.caller_id}: not in voice"
            )
            return GateDecision(
                GateVerdict.NOT_IN_VOICE,
                message="You must join a voice channel first.",
            )

        channel_id = request.voice_channel_id
        async with self.registry.transaction() as txn:
            session, created = txn.get_or_create(
                channel_id, request.caller_id, request.text_channel_id
            )

            if created:
                verdict = GateVerdict.CREATED
            elif session.is_leader(request.caller_id):
                session.last_text_channel_id = request.text_channel_id
                verdict = GateVerdict.LEADER
            elif not session.has_leader:
                session.claim_leadership(request.caller_id, request.text_channel_id)
                verdict = GateVerdict.CLAIMED
            else:
                verdict = GateVerdict.LEADER_HELD

            leader_id = session.leader_id

        if verdict is GateVerdict.LEADER_HELD:
            logger.debug(
                f"Rejected {request.command_name} from {request.caller_id}: "
                f"channel {channel_id} is led by {leader_id}"
            )
            return GateDecision(
                verdict,
                message=(
                    f"The game in <#{channel_id}> already has a leader: <@{leader_id}>."
                ),
                leader_id=leader_id,
            )

        if verdict is GateVerdict.CREATED:
            logger.info(f"{request.caller_id} started a game in channel {channel_id}")
            announcement = (
                f"👑 <@{request.caller_id}> started a game in <#{channel_id}> "
                "and is now the game leader."
            )
        elif verdict is GateVerdict.CLAIMED:
            logger.info(f"{request.caller_id} claimed leadership of channel {channel_id}")
            announcement = (
                f"👑 <@{request.caller_id}> is now the game leader of <#{channel_id}>."
            )
        else:
            announcement = None

        return GateDecision(verdict, announcement=announcement, leader_id=leader_id)
