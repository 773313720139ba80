#!/usr/bin/env python3
"""
Architecture tests for the Discord Game Muter.

Verifies that all components can be imported, configured and wired into a
discord.py bot.
"""

import pytest

from discord_game_muter.config.settings import SimpleConfig, SimpleConfigManager
from discord_game_muter.infrastructure.exceptions import (
    ConfigurationError,
    GameMuterError,
    TokenError,
)


class TestArchitectureImports:
    """Test that all modules can be imported correctly."""

    def test_main_package_import(self):
        """Test that the main package can be imported."""
        import discord_game_muter

        assert hasattr(discord_game_muter, "__version__")
        assert hasattr(discord_game_muter, "__author__")

    def test_core_imports(self):
        """Test core module imports."""
        from discord_game_muter.core import (
            AuthorizationGate,
            GameService,
            PresenceReactor,
            SessionRegistry,
        )
        from discord_game_muter.core.authorization import AuthorizationGate as GateClass
        from discord_game_muter.core.session_registry import (
            SessionRegistry as RegistryClass,
        )

        assert AuthorizationGate == GateClass
        assert SessionRegistry == RegistryClass
        assert GameService is not None
        assert PresenceReactor is not None

    def test_bot_imports(self):
        """Test bot module imports."""
        from discord_game_muter.bots import GameMuterBot
        from discord_game_muter.bots.commands import GameCommands, InfoCommands, SetupCommands
        from discord_game_muter.bots.handlers import EventHandlers

        assert GameMuterBot is not None
        assert all([GameCommands, InfoCommands, SetupCommands, EventHandlers])

    def test_exception_hierarchy(self):
        assert issubclass(TokenError, ConfigurationError)
        assert issubclass(ConfigurationError, GameMuterError)


class TestConfiguration:
    """Test the environment-based configuration."""

    def test_defaults(self):
        config = SimpleConfig(bot_token="token")

        assert config.command_prefix == "!"
        assert config.log_level == "INFO"
        assert config.data_dir == "data"
        assert config.activity_name == "Among Us"

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DISCORD_BOT_TOKEN", "secret")
        monkeypatch.setenv("BOT_PREFIX", "?")
        monkeypatch.setenv("BOT_ACTIVITY", "Werewolf")
        monkeypatch.delenv("DATA_DIR", raising=False)

        config = SimpleConfigManager(str(tmp_path / "missing.env")).get_config()

        assert config.bot_token == "secret"
        assert config.command_prefix == "?"
        assert config.activity_name == "Werewolf"
        assert config.data_dir == "data"

    def test_missing_token(self, monkeypatch, tmp_path):
        monkeypatch.delenv("DISCORD_BOT_TOKEN", raising=False)

        manager = SimpleConfigManager(str(tmp_path / "missing.env"))
        with pytest.raises(TokenError):
            manager.get_config()


class TestBotWiring:
    """Test that GameMuterBot registers its commands and checks."""

    @pytest.fixture
    def bot_instance(self, mock_config):
        from discord_game_muter.bots.bot_core import GameMuterBot

        return GameMuterBot(config=mock_config)

    def test_commands_registered(self, bot_instance):
        bot = bot_instance.bot
        for name in ("play", "discuss", "kill", "revive", "reset", "help", "ping",
                     "prefix", "setprefix", "resetprefix"):
            assert bot.get_command(name) is not None, name

        assert bot.get_command("muteall") is bot.get_command("play")
        assert bot.get_command("unmuteall") is bot.get_command("discuss")

    def test_components_share_registry(self, bot_instance):
        assert bot_instance.gate.registry is bot_instance.registry
        assert bot_instance.presence_reactor.registry is bot_instance.registry
        assert bot_instance.game_service.registry is bot_instance.registry

    def test_session_gate_installed(self, bot_instance):
        assert len(bot_instance.bot._checks) == 1
