"""
Game session state and its transitions.

A ``GameSession`` belongs to exactly one voice channel. Transitions mutate
the session in place and return the mute directives the caller must issue
to the platform once the registry lock has been released. Nothing in this
module performs I/O.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Set

from .results import MuteDirective
from .types import ChannelId, MemberId, VACANT_LEADER


class TransitionStatus(Enum):
    """Whether a transition changed the session."""

    APPLIED = "applied"
    ALREADY_KILLED = "already_killed"
    NOT_KILLED = "not_killed"


@dataclass
class Transition:
    """Result of a state machine step."""

    status: TransitionStatus
    directives: List[MuteDirective] = field(default_factory=list)

    @property
    def applied(self) -> bool:
        return self.status is TransitionStatus.APPLIED


@dataclass
class GameSession:
    """Per-voice-channel game state."""

    channel_id: ChannelId
    last_text_channel_id: ChannelId
    leader_id: Optional[MemberId] = VACANT_LEADER
    global_unmute: bool = True
    dead_members: Set[MemberId] = field(default_factory=set)

    # Leadership

    @property
    def has_leader(self) -> bool:
        return self.leader_id is not VACANT_LEADER

    def is_leader(self, member_id: MemberId) -> bool:
        return self.has_leader and self.leader_id == member_id

    def claim_leadership(self, member_id: MemberId, text_channel_id: ChannelId) -> None:
        self.leader_id = member_id
        self.last_text_channel_id = text_channel_id

    def vacate_leadership(self) -> None:
        self.leader_id = VACANT_LEADER

    # Phases

    @property
    def game_muted(self) -> bool:
        """True while the game is in its play (everyone muted) phase."""
        return not self.global_unmute

    def mute_all(self, roster: Iterable[MemberId]) -> Transition:
        """Enter the play phase: mute everyone present, dead or alive."""
        self.global_unmute = False
        return Transition(
            TransitionStatus.APPLIED,
            [MuteDirective(member_id, True) for member_id in roster],
        )

    def unmute_all_except_dead(self, roster: Iterable[MemberId]) -> Transition:
        """Enter the discussion phase: unmute everyone present who is alive."""
        self.global_unmute = True
        return Transition(
            TransitionStatus.APPLIED,
            [
                MuteDirective(member_id, False)
                for member_id in roster
                if member_id not in self.dead_members
            ],
        )

    # Deaths

    def is_dead(self, member_id: MemberId) -> bool:
        return member_id in self.dead_members

    def kill(self, member_id: MemberId) -> Transition:
        """Mark a member dead and mute them regardless of phase."""
        if member_id in self.dead_members:
            return Transition(TransitionStatus.ALREADY_KILLED)

        self.dead_members.add(member_id)
        return Transition(TransitionStatus.APPLIED, [MuteDirective(member_id, True)])

    def revive(self, member_id: MemberId) -> Transition:
        """Bring a member back; they are unmuted only during discussion."""
        if member_id not in self.dead_members:
            return Transition(TransitionStatus.NOT_KILLED)

        self.dead_members.discard(member_id)
        directives = [MuteDirective(member_id, False)] if self.global_unmute else []
        return Transition(TransitionStatus.APPLIED, directives)

    def reset(self, roster: Iterable[MemberId]) -> Transition:
        """Clear all deaths, return to discussion and unmute everyone present."""
        self.dead_members.clear()
        self.global_unmute = True
        return Transition(
            TransitionStatus.APPLIED,
            [MuteDirective(member_id, False) for member_id in roster],
        )

    def forget_member(self, member_id: MemberId) -> bool:
        """Drop a departed member's dead flag. Returns True if they were dead."""
        if member_id in self.dead_members:
            self.dead_members.discard(member_id)
            return True
        return False
