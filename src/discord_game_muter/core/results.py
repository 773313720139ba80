"""
Tagged command outcomes.

Every fallible game operation returns a ``CommandOutcome`` instead of
raising; the bot's dispatch boundary turns it into a single reply message.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, List

from .types import MemberId


class OutcomeKind(Enum):
    """Classification of a command result."""

    OK = "ok"
    AUTHORIZATION_ERROR = "authorization_error"
    ARGUMENT_ERROR = "argument_error"
    REMOTE_ERROR = "remote_error"


@dataclass(frozen=True)
class MuteDirective:
    """A server-mute change to apply to one member."""

    member_id: MemberId
    mute: bool


@dataclass(frozen=True)
class CommandOutcome:
    """Result of a gated command, plus the mute directives it produced."""

    kind: OutcomeKind
    message: str
    directives: List[MuteDirective] = field(default_factory=list)
    failed_member_ids: List[MemberId] = field(default_factory=list)

    @classmethod
    def ok(cls, message: str, directives: Iterable[MuteDirective] = ()) -> "CommandOutcome":
        return cls(OutcomeKind.OK, message, list(directives))

    @classmethod
    def authorization_error(cls, message: str) -> "CommandOutcome":
        return cls(OutcomeKind.AUTHORIZATION_ERROR, message)

    @classmethod
    def argument_error(cls, message: str) -> "CommandOutcome":
        return cls(OutcomeKind.ARGUMENT_ERROR, message)

    @property
    def is_ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    def with_remote_failures(self, member_ids: Iterable[MemberId]) -> "CommandOutcome":
        """
        Mark the outcome as partially failed on the platform side.

        Session state is not rolled back; the outcome only records which
        members could not be updated.
        """
        failed = list(member_ids)
        if not failed:
            return self
        return replace(self, kind=OutcomeKind.REMOTE_ERROR, failed_member_ids=failed)
