"""Database operations manager.

Every write here is best-effort: a failed query is logged and reported through
the return value, never raised, so a database problem cannot stall a game.
"""

import aiosqlite
import logging
from typing import Optional, List, Dict
from datetime import datetime, timezone

from database.migrations import get_database_path

logger = logging.getLogger(__name__)

LEADERBOARD_ORDERINGS = ('wins', 'kills', 'revives')


class DatabaseManager:
    """Manages all database operations."""

    def __init__(self, db_path: Optional[str] = None):
        self.db_path = db_path or get_database_path()

    def _connect(self) -> aiosqlite.Connection:
        """Open a database connection, to be used with ``async with``."""
        return aiosqlite.connect(self.db_path)

    # Leaderboard operations
    async def update_leaderboard(
        self,
        player,
        guild_id: str,
        wins: int = 0,
        kills: int = 0,
        revives: int = 0
    ) -> bool:
        """Add a finished game's counters to a player's row."""
        try:
            async with self._connect() as db:
                await db.execute(
                    """
                    INSERT INTO leaderboard
                    (user_id, guild_id, username, wins, kills, revives, games_played, last_played)
                    VALUES (?, ?, ?, ?, ?, ?, 1, ?)
                    ON CONFLICT(user_id, guild_id) DO UPDATE SET
                        username = excluded.username,
                        wins = wins + excluded.wins,
                        kills = kills + excluded.kills,
                        revives = revives + excluded.revives,
                        games_played = games_played + 1,
                        last_played = excluded.last_played
                    """,
                    (
                        player.player_id,
                        str(guild_id),
                        player.username,
                        wins,
                        kills,
                        revives,
                        datetime.now(timezone.utc).isoformat(sep=" ")
                    )
                )
                await db.commit()
        except aiosqlite.Error:
            logger.exception("Error updating leaderboard for %s", player.username)
            return False

        logger.debug("Leaderboard updated for %s", player.username)
        return True

    async def get_leaderboard(
        self,
        guild_id: str,
        order_by: str = 'wins',
        limit: int = 10
    ) -> List[Dict]:
        """Get a server's top players."""
        if order_by not in LEADERBOARD_ORDERINGS:
            raise ValueError(f"Cannot order leaderboard by {order_by!r}")

        # order_by is checked against a fixed list above
        query = f"""
            SELECT user_id, username, wins, kills, revives, games_played
            FROM leaderboard
            WHERE guild_id = ?
            ORDER BY {order_by} DESC, wins DESC, kills DESC
            LIMIT ?
        """

        try:
            async with self._connect() as db:
                async with db.execute(query, (str(guild_id), limit)) as cursor:
                    results = []
                    async for row in cursor:
                        results.append({
                            'user_id': row[0],
                            'username': row[1],
                            'wins': row[2],
                            'kills': row[3],
                            'revives': row[4],
                            'games_played': row[5]
                        })
                    return results
        except aiosqlite.Error:
            logger.exception("Error fetching leaderboard for guild %s", guild_id)
            return []

    async def get_player_stats(self, user_id: str, guild_id: str) -> Optional[Dict]:
        """Get a player's totals in a server."""
        try:
            async with self._connect() as db:
                async with db.execute(
                    """
                    SELECT user_id, username, wins, kills, revives, games_played, last_played
                    FROM leaderboard
                    WHERE user_id = ? AND guild_id = ?
                    """,
                    (str(user_id), str(guild_id))
                ) as cursor:
                    row = await cursor.fetchone()
        except aiosqlite.Error:
            logger.exception("Error fetching stats for %s", user_id)
            return None

        if not row:
            return None

        return {
            'user_id': row[0],
            'username': row[1],
            'wins': row[2],
            'kills': row[3],
            'revives': row[4],
            'games_played': row[5],
            'last_played': row[6],
        }

    # Game operations
    async def create_game(self, guild_id: str) -> Optional[int]:
        """Create a game record and return its id."""
        try:
            async with self._connect() as db:
                cursor = await db.execute(
                    "INSERT INTO games (guild_id) VALUES (?)",
                    (str(guild_id),)
                )
                game_id = cursor.lastrowid
                await db.commit()
        except aiosqlite.Error:
            logger.exception("Error creating game for guild %s", guild_id)
            return None

        logger.info("Game created with ID: %s", game_id)
        return game_id

    async def update_game_winner(self, game_id: int, winner_id: str) -> bool:
        """Record a game's winner."""
        try:
            async with self._connect() as db:
                await db.execute(
                    """
                    UPDATE games
                    SET winner_id = ?,
                        completed_at = ?
                    WHERE game_id = ?
                    """,
                    (winner_id, datetime.now(timezone.utc).isoformat(sep=" "), game_id)
                )
                await db.commit()
        except aiosqlite.Error:
            logger.exception("Error updating winner of game %s", game_id)
            return False

        logger.info("Updated game %s with winner ID: %s", game_id, winner_id)
        return True

    # Global stats operations
    async def update_total_servers(self, total_servers: int) -> bool:
        """Record how many servers the bot is in."""
        try:
            async with self._connect() as db:
                await db.execute(
                    "UPDATE game_data SET total_servers = ? WHERE id = 1",
                    (total_servers,)
                )
                await db.commit()
        except aiosqlite.Error:
            logger.exception("Error updating total servers")
            return False

        logger.info("Total servers updated to: %d", total_servers)
        return True

    async def increment_games_played(self) -> bool:
        """Count one more finished game."""
        try:
            async with self._connect() as db:
                await db.execute(
                    "UPDATE game_data SET total_games_played = total_games_played + 1 WHERE id = 1"
                )
                await db.commit()
        except aiosqlite.Error:
            logger.exception("Error incrementing total games played")
            return False

        return True

    async def get_global_stats(self) -> Dict:
        """Get the bot-wide server and game totals."""
        try:
            async with self._connect() as db:
                async with db.execute(
                    "SELECT total_servers, total_games_played FROM game_data WHERE id = 1"
                ) as cursor:
                    row = await cursor.fetchone()
        except aiosqlite.Error:
            logger.exception("Error fetching global stats")
            row = None

        if not row:
            return {'total_servers': 0, 'total_games_played': 0}

        return {'total_servers': row[0], 'total_games_played': row[1]}
