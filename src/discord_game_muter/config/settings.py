"""
Configuration management for the Discord Game Muter bot.

Settings come from environment variables, optionally loaded from a ``.env``
file. Only the bot token is required.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from discord_game_muter.infrastructure.exceptions import TokenError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND_PREFIX = "!"
DEFAULT_ACTIVITY = "Among Us"


@dataclass
class SimpleConfig:
    """Runtime configuration for the bot."""

    # Required configuration
    bot_token: str

    # Optional configuration with defaults
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    log_level: str = "INFO"
    data_dir: str = "data"
    activity_name: str = DEFAULT_ACTIVITY


class SimpleConfigManager:
    """Reads ``SimpleConfig`` from the process environment."""

    def __init__(self, env_file_path: str = ".env"):
        """
        Initialize configuration manager.

        Args:
            env_file_path: Path to environment file
        """
        self.env_file_path = env_file_path
        self._load_environment()

    def _load_environment(self) -> None:
        """Load environment variables from file."""
        if os.path.exists(self.env_file_path):
            load_dotenv(dotenv_path=self.env_file_path)
            logger.info(f"Loaded environment from {self.env_file_path}")
        else:
            logger.debug(f"Environment file {self.env_file_path} not found")

    def _get_required_env(self, key: str) -> str:
        """
        Get required environment variable.

        Raises:
            TokenError: If the variable is not set
        """
        value = os.getenv(key)
        if not value:
            raise TokenError(f"Required environment variable {key} is not set")
        return value

    def _get_optional_env(self, key: str, default: Optional[str] = None) -> str:
        """Get optional environment variable, falling back to ``default``."""
        value = os.getenv(key)
        return value if value else default

    def get_config(self) -> SimpleConfig:
        """
        Build the bot configuration.

        Returns:
            SimpleConfig: Bot configuration

        Raises:
            TokenError: If DISCORD_BOT_TOKEN is missing
        """
        try:
            config = SimpleConfig(
                bot_token=self._get_required_env("DISCORD_BOT_TOKEN"),
                command_prefix=self._get_optional_env(
                    "BOT_PREFIX", DEFAULT_COMMAND_PREFIX
                ),
                log_level=self._get_optional_env("LOG_LEVEL", "INFO"),
                data_dir=self._get_optional_env("DATA_DIR", "data"),
                activity_name=self._get_optional_env("BOT_ACTIVITY", DEFAULT_ACTIVITY),
            )
        except TokenError as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        logger.info("Configuration loaded successfully")
        return config


# Global configuration manager instance
config_manager = SimpleConfigManager()
