"""
Core bot management class for the Discord Game Muter.

This module builds the discord.py bot, wires the game components together
and registers commands and event handlers.
"""

import sys
from typing import List, Optional

import discord
from discord.ext import commands

from discord_game_muter.bots.commands import (
    BaseCommandHandler,
    GameCommands,
    InfoCommands,
    SetupCommands,
)
from discord_game_muter.bots.handlers import EventHandlers
from discord_game_muter.bots.utils import PermissionUtils
from discord_game_muter.config.settings import SimpleConfig, config_manager
from discord_game_muter.core import (
    AuthorizationGate,
    GameService,
    PrefixStorage,
    PresenceReactor,
    SessionRegistry,
)
from discord_game_muter.core import types
from discord_game_muter.infrastructure import setup_logging
from discord_game_muter.infrastructure.exceptions import ConfigurationError


class GameMuterBot:
    """Main bot class that manages the Discord bot and all its components."""

    def __init__(self, config: Optional[SimpleConfig] = None):
        """Initialize the bot with all necessary components."""
        self.logger = setup_logging(
            component_name="game_muter",
            log_file="logs/game_muter.log",
        )

        if config is None:
            try:
                config = config_manager.get_config()
            except ConfigurationError as e:
                self.logger.error(f"Failed to load configuration: {e}")
                sys.exit(1)
        self.config = config

        intents = discord.Intents.default()
        intents.voice_states = True
        intents.guilds = True
        intents.members = True
        intents.message_content = True

        self.bot = commands.Bot(
            command_prefix=self._resolve_prefix,
            intents=intents,
            help_command=None,
        )

        # Game components
        self.registry = SessionRegistry()
        self.gate = AuthorizationGate(self.registry)
        self.presence_reactor = PresenceReactor(self.registry)
        self.game_service = GameService(self.registry)
        self.prefix_storage = PrefixStorage(
            data_dir=self.config.data_dir,
            default_prefix=self.config.command_prefix,
        )

        self.event_handlers: Optional[EventHandlers] = None
        self.command_handlers: dict[str, BaseCommandHandler] = {}

        self._setup_event_handlers()
        self._setup_command_handlers()

    def _resolve_prefix(self, bot: commands.Bot, message: discord.Message) -> List[str]:
        """Per-guild prefix, or a mention of the bot."""
        guild_id = message.guild.id if message.guild else None
        prefix = self.prefix_storage.get_prefix(guild_id)
        return commands.when_mentioned_or(prefix)(bot, message)

    def _setup_event_handlers(self) -> None:
        """Setup event handlers for the bot."""
        self.event_handlers = EventHandlers(
            bot=self,
            presence_reactor=self.presence_reactor,
            logger=self.logger,
        )

        self.bot.event(self.event_handlers.on_ready)
        self.bot.event(self.event_handlers.on_message)
        self.bot.event(self.event_handlers.on_command_error)
        self.bot.event(self.event_handlers.on_voice_state_update)

    def _setup_command_handlers(self) -> None:
        """Setup command handlers for the bot."""
        handler_kwargs = dict(
            game_service=self.game_service,
            prefix_storage=self.prefix_storage,
            logger=self.logger,
            config=self.config,
        )
        self.command_handlers = {
            "game": GameCommands(**handler_kwargs),
            "setup": SetupCommands(**handler_kwargs),
            "info": InfoCommands(**handler_kwargs),
        }

        self.bot.add_check(PermissionUtils.session_gate(self.gate))
        self._register_commands()

    def _register_commands(self) -> None:
        """Register all bot commands."""
        game: GameCommands = self.command_handlers["game"]
        setup: SetupCommands = self.command_handlers["setup"]
        info: InfoCommands = self.command_handlers["info"]

        @self.bot.command(name=types.CMD_PLAY, aliases=types.COMMAND_ALIASES[types.CMD_PLAY])
        async def play_wrapper(ctx):
            await game.play_command(ctx)

        @self.bot.command(
            name=types.CMD_DISCUSS, aliases=types.COMMAND_ALIASES[types.CMD_DISCUSS]
        )
        async def discuss_wrapper(ctx):
            await game.discuss_command(ctx)

        @self.bot.command(name=types.CMD_KILL)
        async def kill_wrapper(ctx, *, target: str = ""):
            await game.kill_command(ctx, target)

        @self.bot.command(name=types.CMD_REVIVE)
        async def revive_wrapper(ctx, *, target: str = ""):
            await game.revive_command(ctx, target)

        @self.bot.command(name=types.CMD_RESET)
        async def reset_wrapper(ctx):
            await game.reset_command(ctx)

        @self.bot.command(name=types.CMD_HELP)
        async def help_wrapper(ctx):
            await info.help_command(ctx)

        @self.bot.command(name=types.CMD_PING)
        async def ping_wrapper(ctx):
            await info.ping_command(ctx)

        @self.bot.command(name=types.CMD_PREFIX)
        async def prefix_wrapper(ctx):
            await setup.prefix_command(ctx)

        @self.bot.command(name=types.CMD_SET_PREFIX)
        @PermissionUtils.is_guild_manager()
        async def set_prefix_wrapper(ctx, prefix: str = ""):
            await setup.set_prefix_command(ctx, prefix)

        @self.bot.command(name=types.CMD_RESET_PREFIX)
        @PermissionUtils.is_guild_manager()
        async def reset_prefix_wrapper(ctx):
            await setup.reset_prefix_command(ctx)

    async def start(self) -> None:
        """Start the bot."""
        try:
            self.logger.info("Starting Game Muter...")
            await self.bot.start(self.config.bot_token)
        except Exception as e:
            self.logger.critical(f"Failed to start Game Muter: {e}")
            raise

    async def close(self) -> None:
        """Close the bot and clean up resources."""
        if self.bot:
            await self.bot.close()


# Global bot instance
_bot_instance: Optional[GameMuterBot] = None


def get_bot_instance() -> GameMuterBot:
    """Get the global bot instance."""
    global _bot_instance
    if _bot_instance is None:
        _bot_instance = GameMuterBot()
    return _bot_instance


async def main() -> None:
    """Initialize and run the bot until it is stopped."""
    bot = get_bot_instance()

    try:
        await bot.start()
    except KeyboardInterrupt:
        bot.logger.info("Bot shutdown requested")
    except Exception as e:
        bot.logger.critical(f"Fatal error: {e}")
        raise
    finally:
        await bot.close()
