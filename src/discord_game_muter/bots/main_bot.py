"""
Entry point for the Game Muter Discord bot.

Run with ``python -m discord_game_muter.bots.main_bot`` or the
``discord-game-muter`` console script.
"""

import asyncio

from discord_game_muter.bots.bot_core import main


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
