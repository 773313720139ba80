"""
Guild Prefix Storage

Persists per-guild command prefixes across bot restarts.
Uses a JSON file with file locking and an atomic replace on write.
"""

import fcntl
import json
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

from discord_game_muter.infrastructure.exceptions import ValidationError
from discord_game_muter.infrastructure.logging import setup_logging
from .types import GuildId, MAX_PREFIX_LENGTH

logger = setup_logging(
    component_name="prefix_storage",
    log_file="logs/game_muter.log",
)


class GuildPrefix:
    """Data class for one guild's prefix."""

    def __init__(self, guild_id: GuildId, prefix: str, updated_at: Optional[float] = None):
        self.guild_id = guild_id
        self.prefix = prefix
        self.updated_at = updated_at or time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "guild_id": self.guild_id,
            "prefix": self.prefix,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GuildPrefix":
        """Create from dictionary."""
        return cls(
            guild_id=data["guild_id"],
            prefix=data["prefix"],
            updated_at=data.get("updated_at"),
        )


def validate_prefix(prefix: str) -> str:
    """
    Check a prefix is usable in chat.

    Raises:
        ValidationError: If the prefix is empty, too long or contains
            whitespace or backticks
    """
    if not prefix:
        raise ValidationError("The prefix cannot be empty.")
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise ValidationError(
            f"The prefix can be at most {MAX_PREFIX_LENGTH} characters long."
        )
    if any(ch.isspace() for ch in prefix) or "`" in prefix:
        raise ValidationError("The prefix cannot contain spaces or backticks.")
    return prefix


class PrefixStorage:
    """Manages persistent storage of guild command prefixes."""

    def __init__(self, data_dir: str = "data", default_prefix: str = "!"):
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.prefixes_file = self.data_dir / "guild_prefixes.json"
        self.default_prefix = default_prefix
        self._lock = threading.RLock()
        self._prefix_cache: Dict[GuildId, GuildPrefix] = {}
        self._load_prefixes()

    def _load_prefixes(self) -> None:
        """Load prefixes from file."""
        if not self.prefixes_file.exists():
            logger.info("Guild prefix file not found, using defaults")
            return

        try:
            with open(self.prefixes_file, "r", encoding="utf-8") as f:
                with self._lock:
                    fcntl.flock(f.fileno(), fcntl.LOCK_SH)
                    data = json.load(f)
                    fcntl.flock(f.fileno(), fcntl.LOCK_UN)

            for guild_id_str, prefix_data in data.items():
                guild_id = int(guild_id_str)
                self._prefix_cache[guild_id] = GuildPrefix.from_dict(prefix_data)

            logger.info(f"Loaded command prefixes for {len(self._prefix_cache)} guilds")
        except (OSError, ValueError, KeyError) as e:
            logger.error(f"Failed to load guild prefixes: {e}", exc_info=True)

    def _save_prefixes(self) -> None:
        """Write all prefixes to a temp file and move it into place."""
        temp_file = self.prefixes_file.with_suffix(".tmp")
        try:
            with open(temp_file, "w", encoding="utf-8") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                json.dump(
                    {
                        str(guild_id): record.to_dict()
                        for guild_id, record in self._prefix_cache.items()
                    },
                    f,
                    indent=2,
                    ensure_ascii=False,
                )
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)

            temp_file.replace(self.prefixes_file)
            logger.debug("Guild prefixes saved successfully")
        except OSError as e:
            logger.error(f"Failed to save guild prefixes: {e}", exc_info=True)
            if temp_file.exists():
                temp_file.unlink()

    def get_prefix(self, guild_id: Optional[GuildId]) -> str:
        """Get the prefix for a guild; direct messages use the default."""
        if guild_id is None:
            return self.default_prefix
        with self._lock:
            record = self._prefix_cache.get(guild_id)
            return record.prefix if record else self.default_prefix

    def set_prefix(self, guild_id: GuildId, prefix: str) -> GuildPrefix:
        """
        Store a new prefix for a guild.

        Raises:
            ValidationError: If the prefix is not usable
        """
        prefix = validate_prefix(prefix.strip())
        with self._lock:
            record = GuildPrefix(guild_id=guild_id, prefix=prefix)
            self._prefix_cache[guild_id] = record
            self._save_prefixes()
            logger.info(f"Set command prefix for guild {guild_id} to '{prefix}'")
            return record

    def reset_prefix(self, guild_id: GuildId) -> bool:
        """Forget a guild's custom prefix."""
        with self._lock:
            if guild_id in self._prefix_cache:
                del self._prefix_cache[guild_id]
                self._save_prefixes()
                logger.info(f"Reset command prefix for guild {guild_id}")
                return True
            return False
