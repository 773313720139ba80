"""
Process-wide registry of game sessions keyed by voice channel.

All access goes through a single ``asyncio.Lock``. Single operations
(``get``, ``get_or_create``, ``remove``) take the lock themselves; a logical
read-modify-write spanning several steps uses ``transaction()`` and works on
the returned ``RegistryTransaction`` while the lock is held.

Callers must not await platform I/O inside a transaction.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional, Tuple

from discord_game_muter.infrastructure.exceptions import SessionInvariantError
from discord_game_muter.infrastructure.logging import setup_logging
from .session import GameSession
from .types import ChannelId, MemberId

logger = setup_logging(
    component_name="session_registry",
    log_file="logs/game_muter.log",
)


class RegistryTransaction:
    """Unlocked view of the registry, valid only inside ``transaction()``."""

    def __init__(self, sessions: Dict[ChannelId, GameSession]):
        self._sessions = sessions

    def get(self, channel_id: ChannelId) -> Optional[GameSession]:
        return self._sessions.get(channel_id)

    def create(
        self,
        channel_id: ChannelId,
        creator_id: MemberId,
        text_channel_id: ChannelId,
    ) -> GameSession:
        """Create a session led by ``creator_id``."""
        if channel_id in self._sessions:
            raise SessionInvariantError(
                f"Session for voice channel {channel_id} already exists"
            )

        session = GameSession(
            channel_id=channel_id,
            last_text_channel_id=text_channel_id,
            leader_id=creator_id,
        )
        self._sessions[channel_id] = session
        logger.info(
            f"Created session for voice channel {channel_id} (leader {creator_id})"
        )
        return session

    def get_or_create(
        self,
        channel_id: ChannelId,
        creator_id: MemberId,
        text_channel_id: ChannelId,
    ) -> Tuple[GameSession, bool]:
        """Return the channel's session and whether it was just created."""
        session = self._sessions.get(channel_id)
        if session is not None:
            return session, False
        return self.create(channel_id, creator_id, text_channel_id), True

    def remove(self, channel_id: ChannelId) -> Optional[GameSession]:
        session = self._sessions.pop(channel_id, None)
        if session is not None:
            logger.info(f"Removed session for voice channel {channel_id}")
        return session


class SessionRegistry:
    """Concurrency-safe store of at most one session per voice channel."""

    def __init__(self):
        self._sessions: Dict[ChannelId, GameSession] = {}
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[RegistryTransaction]:
        """Hold the registry lock for one logical operation."""
        async with self._lock:
            yield RegistryTransaction(self._sessions)

    async def get(self, channel_id: ChannelId) -> Optional[GameSession]:
        async with self.transaction() as txn:
            return txn.get(channel_id)

    async def get_or_create(
        self,
        channel_id: ChannelId,
        creator_id: MemberId,
        text_channel_id: ChannelId,
    ) -> Tuple[GameSession, bool]:
        async with self.transaction() as txn:
            return txn.get_or_create(channel_id, creator_id, text_channel_id)

    async def remove(self, channel_id: ChannelId) -> Optional[GameSession]:
        async with self.transaction() as txn:
            return txn.remove(channel_id)

    def channel_ids(self) -> List[ChannelId]:
        """Snapshot of channels with a live session."""
        return list(self._sessions)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, channel_id: ChannelId) -> bool:
        return channel_id in self._sessions
