"""
Pytest configuration and shared fixtures for the Discord Game Muter test suite.

Discord objects are ``MagicMock(spec=...)`` stand-ins; the game core is used
for real.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

import discord
from discord.ext import commands

from discord_game_muter.config.settings import SimpleConfig
from discord_game_muter.core.authorization import AuthorizationGate
from discord_game_muter.core.game_service import GameService
from discord_game_muter.core.prefix_storage import PrefixStorage
from discord_game_muter.core.presence import PresenceReactor
from discord_game_muter.core.session_registry import SessionRegistry

VOICE_CHANNEL_ID = 987654321
TEXT_CHANNEL_ID = 555000111
GUILD_ID = 123456789


@pytest.fixture
def mock_config(tmp_path):
    """Create a configuration for testing."""
    return SimpleConfig(
        bot_token="mock_bot_token",
        command_prefix="!",
        log_level="DEBUG",
        data_dir=str(tmp_path / "data"),
        activity_name="Among Us",
    )


@pytest.fixture
def registry():
    return SessionRegistry()


@pytest.fixture
def gate(registry):
    return AuthorizationGate(registry)


@pytest.fixture
def reactor(registry):
    return PresenceReactor(registry)


@pytest.fixture
def game_service(registry):
    return GameService(registry)


@pytest.fixture
def prefix_storage(tmp_path):
    return PrefixStorage(data_dir=str(tmp_path / "data"), default_prefix="!")


@pytest.fixture
def make_voice_channel():
    """Factory for mock voice channels with a member list."""

    def factory(channel_id=VOICE_CHANNEL_ID, members=None):
        channel = MagicMock(spec=discord.VoiceChannel)
        channel.id = channel_id
        channel.name = f"Voice {channel_id}"
        channel.members = list(members or [])
        return channel

    return factory


@pytest.fixture
def make_member():
    """Factory for mock guild members, optionally placed in a voice channel."""

    def factory(member_id, name=None, channel=None, muted=False):
        member = MagicMock(spec=discord.Member)
        member.id = member_id
        member.display_name = name or f"Player {member_id}"
        member.bot = False
        member.edit = AsyncMock()
        if channel is None:
            member.voice = None
        else:
            member.voice = MagicMock(spec=discord.VoiceState)
            member.voice.channel = channel
            member.voice.mute = muted
            channel.members.append(member)
        return member

    return factory


@pytest.fixture
def make_guild():
    """Factory for a mock guild that resolves the given members by id."""

    def factory(members=()):
        by_id = {member.id: member for member in members}
        guild = MagicMock(spec=discord.Guild)
        guild.id = GUILD_ID
        guild.name = "Test Guild"
        guild.get_member = MagicMock(side_effect=by_id.get)
        return guild

    return factory


@pytest.fixture
def make_context():
    """Factory for a mock command context."""

    def factory(author, guild, command_name="play", channel_id=TEXT_CHANNEL_ID):
        context = MagicMock(spec=commands.Context)
        context.author = author
        context.guild = guild
        context.send = AsyncMock()
        context.channel = MagicMock(spec=discord.TextChannel)
        context.channel.id = channel_id
        context.command = MagicMock(spec=commands.Command)
        context.command.qualified_name = command_name
        context.command.name = command_name
        context.command.signature = ""
        context.clean_prefix = "!"
        context.voice_snapshot = None
        return context

    return factory


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
