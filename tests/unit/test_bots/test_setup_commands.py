"""
Unit tests for SetupCommands and InfoCommands.
"""

import pytest

import discord

from discord_game_muter.bots.commands.info_commands import InfoCommands
from discord_game_muter.bots.commands.setup_commands import SetupCommands


@pytest.fixture
def setup_handler(prefix_storage):
    return SetupCommands(prefix_storage=prefix_storage)


class TestSetupCommands:
    """Test cases for the prefix commands."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_set_and_show_prefix(
        self, setup_handler, prefix_storage, make_member, make_guild, make_context
    ):
        admin = make_member(1, "Admin")
        guild = make_guild([admin])

        await setup_handler.set_prefix_command(make_context(admin, guild, "setprefix"), "?")
        assert prefix_storage.get_prefix(guild.id) == "?"

        ctx = make_context(admin, guild, "prefix")
        await setup_handler.prefix_command(ctx)
        assert ctx.send.await_args.args[0] == "The command prefix here is `?`."

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_invalid_prefix_is_argument_error(
        self, setup_handler, prefix_storage, make_member, make_guild, make_context
    ):
        admin = make_member(1, "Admin")
        guild = make_guild([admin])
        ctx = make_context(admin, guild, "setprefix")

        await setup_handler.set_prefix_command(ctx, "waytoolong")

        assert ctx.send.await_args.args[0].startswith("> ❌")
        assert prefix_storage.get_prefix(guild.id) == "!"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reset_prefix(
        self, setup_handler, prefix_storage, make_member, make_guild, make_context
    ):
        admin = make_member(1, "Admin")
        guild = make_guild([admin])
        prefix_storage.set_prefix(guild.id, "$")
        ctx = make_context(admin, guild, "resetprefix")

        await setup_handler.reset_prefix_command(ctx)

        assert prefix_storage.get_prefix(guild.id) == "!"
        assert ctx.send.await_args.args[0] == "✅ Command prefix reset to `!`."

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_reset_without_override_is_argument_error(
        self, setup_handler, make_member, make_guild, make_context
    ):
        admin = make_member(1, "Admin")
        ctx = make_context(admin, make_guild([admin]), "resetprefix")

        await setup_handler.reset_prefix_command(ctx)

        assert ctx.send.await_args.args[0].startswith("> ❌")


class TestInfoCommands:
    """Test cases for help and ping."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_help_uses_invoking_prefix(self, make_member, make_guild, make_context):
        member = make_member(1)
        ctx = make_context(member, make_guild([member]), "help")
        ctx.clean_prefix = "?"

        await InfoCommands().help_command(ctx)

        embed = ctx.send.await_args.kwargs["embed"]
        assert isinstance(embed, discord.Embed)
        assert "`?play`" in embed.fields[0].value

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_ping(self, make_member, make_guild, make_context):
        member = make_member(1)
        ctx = make_context(member, make_guild([member]), "ping")

        await InfoCommands().ping_command(ctx)

        assert ctx.send.await_args.args[0] == "Pong!"
