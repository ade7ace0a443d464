"""Database models and schemas."""

# SQL schemas for all tables

CREATE_LEADERBOARD_TABLE = """
CREATE TABLE IF NOT EXISTS leaderboard (
    user_id TEXT NOT NULL,
    guild_id TEXT NOT NULL,
    username TEXT NOT NULL,
    wins INTEGER DEFAULT 0,
    kills INTEGER DEFAULT 0,
    revives INTEGER DEFAULT 0,
    games_played INTEGER DEFAULT 0,
    last_played TIMESTAMP,
    PRIMARY KEY (user_id, guild_id)
);
"""

CREATE_GAMES_TABLE = """
CREATE TABLE IF NOT EXISTS games (
    game_id INTEGER PRIMARY KEY AUTOINCREMENT,
    guild_id TEXT NOT NULL,
    winner_id TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    completed_at TIMESTAMP
);
"""

CREATE_GAME_DATA_TABLE = """
CREATE TABLE IF NOT EXISTS game_data (
    id INTEGER PRIMARY KEY,
    total_servers INTEGER DEFAULT 0,
    total_games_played INTEGER DEFAULT 0
);
"""

SEED_GAME_DATA = """
INSERT OR IGNORE INTO game_data (id, total_servers, total_games_played)
VALUES (1, 0, 0);
"""

# Indexes for performance
CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_leaderboard_guild ON leaderboard(guild_id);",
    "CREATE INDEX IF NOT EXISTS idx_leaderboard_wins ON leaderboard(guild_id, wins DESC);",
    "CREATE INDEX IF NOT EXISTS idx_games_guild ON games(guild_id);",
]
