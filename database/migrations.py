"""Database initialization and migrations."""

import aiosqlite
import logging
import os
from pathlib import Path
from typing import Optional
from database.models import (
    CREATE_LEADERBOARD_TABLE,
    CREATE_GAMES_TABLE,
    CREATE_GAME_DATA_TABLE,
    SEED_GAME_DATA,
    CREATE_INDEXES
)
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_PATH = "./data/royale.db"


def get_database_path() -> str:
    """Get the database path from the environment."""
    return os.getenv("DATABASE_PATH", DEFAULT_DATABASE_PATH)


async def initialize_database(db_path: Optional[str] = None):
    """Initialize database with all tables and the global stats row."""
    db_path = db_path or get_database_path()
    
    # Create data directory if it doesn't exist
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    
    async with aiosqlite.connect(db_path) as db:
        # Create all tables
        await db.execute(CREATE_LEADERBOARD_TABLE)
        await db.execute(CREATE_GAMES_TABLE)
        await db.execute(CREATE_GAME_DATA_TABLE)
        
        # Create indexes
        for index_sql in CREATE_INDEXES:
            await db.execute(index_sql)
        
        # Make sure the global stats row exists
        await db.execute(SEED_GAME_DATA)
        
        await db.commit()
        logger.info("Database initialized at %s", db_path)
