"""
Common types and constants for the Discord Game Muter bot.

Command names live here so the authorization gate, the bot wiring and the
help text agree on them.
"""

from typing import Final, FrozenSet, Optional

# Identifier types (Discord snowflakes)
MemberId = int
ChannelId = int
GuildId = int

# Vacant leader seat
VACANT_LEADER: Final[Optional[MemberId]] = None

# Game commands (gated by session leadership)
CMD_PLAY: Final[str] = "play"
CMD_DISCUSS: Final[str] = "discuss"
CMD_KILL: Final[str] = "kill"
CMD_REVIVE: Final[str] = "revive"
CMD_RESET: Final[str] = "reset"

# Commands that never touch a session
CMD_HELP: Final[str] = "help"
CMD_PING: Final[str] = "ping"
CMD_PREFIX: Final[str] = "prefix"
CMD_SET_PREFIX: Final[str] = "setprefix"
CMD_RESET_PREFIX: Final[str] = "resetprefix"

NO_VOICE_COMMANDS: Final[FrozenSet[str]] = frozenset(
    {CMD_HELP, CMD_PING, CMD_PREFIX, CMD_SET_PREFIX, CMD_RESET_PREFIX}
)

# Original command names kept as aliases
COMMAND_ALIASES = {
    CMD_PLAY: ["muteall"],
    CMD_DISCUSS: ["unmuteall"],
}

# Prefix rules
MAX_PREFIX_LENGTH: Final[int] = 5
