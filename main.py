"""Main entry point for Battle Royale Bot."""

import asyncio
import logging
import os
from dotenv import load_dotenv
from bot.client import create_bot
from bot.events import setup_events
from data.phrases import load_phrases
from database.manager import DatabaseManager
from database.migrations import initialize_database

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

EXTENSIONS = (
    'cogs.royale_commands',
    'cogs.stats_commands',
)


async def main():
    """Main function to start the bot."""
    # Get token
    token = os.getenv("DISCORD_TOKEN")
    if not token:
        logger.error("DISCORD_TOKEN not found in environment variables!")
        logger.error("Please create a .env file with your Discord bot token.")
        return
    
    # Initialize database
    logger.info("Initializing database...")
    await initialize_database()
    
    # Phrases are loaded once and shared by every game
    phrases = load_phrases()
    logger.info("Loaded %d phrases", len(phrases))
    
    # Create bot
    bot = create_bot(DatabaseManager(), phrases)
    
    # Setup events
    setup_events(bot)
    
    async with bot:
        # Load cogs
        for extension in EXTENSIONS:
            await bot.load_extension(extension)
        
        # Start bot
        logger.info("Starting bot...")
        await bot.start(token)


if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Bot stopped by user.")
