#!/usr/bin/env python3
"""
Startup script for the Discord Game Muter bot.
"""

import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from discord_game_muter.bots.bot_core import main
from discord_game_muter.infrastructure import get_logger

logger = get_logger("game_muter")


async def startup():
    """Startup function with error handling."""
    try:
        logger.info("Starting Game Muter...")

        if not Path(".env").exists():
            logger.warning("No .env file found!")

        await main()

    except KeyboardInterrupt:
        logger.info("Bot shutdown requested by user")
    except Exception as e:
        logger.critical(f"Fatal error during startup: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    os.makedirs("logs", exist_ok=True)

    try:
        asyncio.run(startup())
    except KeyboardInterrupt:
        print("\nBot shutdown requested")
    except Exception as e:
        print(f"Fatal error: {e}")
        sys.exit(1)
