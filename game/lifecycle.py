"""Drives one context's game through lobby, rounds and results."""

import asyncio
import logging
import random
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

import config
from game.errors import GameInProgressError, LobbyClosedError
from game.results import GameResults, finalize
from game.revival import maybe_revive
from game.round_engine import RoundOutcome, run_round
from game.session import GameSession, GameState, Player

logger = logging.getLogger(__name__)


class Announcer:
    """Receives everything a game wants to tell its players.

    The base implementation does nothing. The Discord cog sends embeds to the
    channel the game was started in.
    """

    async def lobby_opened(self, join_window: float) -> Optional[int]:
        """Post the join message. Returns its message id, if any."""
        return None

    async def lobby_closed(self, player: Player):
        """Tell a late joiner the game has already started."""

    async def not_enough_players(self):
        pass

    async def roster(self, session: GameSession):
        pass

    async def round_played(self, outcome: RoundOutcome, session: GameSession):
        pass

    async def revived(self, player: Player):
        pass

    async def round_overrun(self, round_number: int, elapsed: float):
        pass

    async def winner(self, player: Optional[Player]):
        pass

    async def results(self, results: GameResults):
        pass


class GameController:
    """Owns a context's GameSession and schedules its lobby and rounds."""

    def __init__(
        self,
        context_id: str,
        store,
        phrases: Sequence[str],
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        join_window: float = config.JOIN_WINDOW_SECONDS,
        first_round_delay: float = config.FIRST_ROUND_DELAY_SECONDS,
        round_interval: float = config.ROUND_INTERVAL_SECONDS,
        round_budget: float = config.ROUND_SOFT_BUDGET_SECONDS,
        revive_chance: float = config.REVIVE_CHANCE,
        min_players: int = config.MIN_PLAYERS
    ):
        self.session = GameSession(context_id=context_id)
        self.store = store
        self.phrases = phrases
        self.rng = rng or random.Random()
        self.clock = clock
        self.join_window = join_window
        self.first_round_delay = first_round_delay
        self.round_interval = round_interval
        self.round_budget = round_budget
        self.revive_chance = revive_chance
        self.min_players = min_players

        self.announcer = Announcer()
        self._task: Optional[asyncio.Task] = None

    @property
    def context_id(self) -> str:
        return self.session.context_id

    @property
    def state(self) -> GameState:
        return self.session.state

    # Scheduling
    def _schedule(self, delay: float, callback):
        """Run ``callback()`` after ``delay`` seconds as the pending task."""
        self._task = asyncio.create_task(self._run_later(delay, callback))
        return self._task

    async def _run_later(self, delay: float, callback):
        await asyncio.sleep(delay)
        try:
            await callback()
        except Exception:
            logger.exception(
                "Game in context %s failed in state %s, resetting",
                self.context_id, self.session.state.value
            )
            self.session.reset()

    def cancel(self):
        """Cancel pending lobby/round work and reset the session."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self.session.reset()

    async def wait_closed(self):
        """Wait until no lobby or round work is pending."""
        while self._task is not None and not self._task.done():
            await self._task

    # Lobby
    async def start_game(self, announcer: Optional[Announcer] = None):
        """
        Open the lobby.

        Raises:
            GameInProgressError: If the context is not idle
        """
        if self.session.state != GameState.IDLE:
            raise GameInProgressError(f"A game is already in progress in {self.context_id}")

        self.session.reset()
        self.session.state = GameState.LOBBY
        self.announcer = announcer or Announcer()

        try:
            self.session.lobby_message_id = await self.announcer.lobby_opened(self.join_window)
        except Exception:
            self.session.reset()
            raise
        self._schedule(self.join_window, self.close_lobby)
        logger.info("Lobby opened in context %s for %ss", self.context_id, self.join_window)

    def join(self, player: Player) -> bool:
        """
        Add a player to the lobby.

        Returns:
            True if the player is new, False for a repeated join

        Raises:
            LobbyClosedError: If the lobby is not open
        """
        if self.session.state != GameState.LOBBY:
            raise LobbyClosedError(f"No open lobby in {self.context_id}")

        added = self.session.add_player(player)
        if added:
            logger.debug("%s joined the lobby in %s", player.username, self.context_id)
        return added

    async def close_lobby(self) -> bool:
        """End the join window. Returns True if the game went Active."""
        if self.session.state != GameState.LOBBY:
            return False

        if len(self.session.players) < self.min_players:
            logger.info(
                "Not enough players in context %s (%d joined)",
                self.context_id, len(self.session.players)
            )
            self.session.reset()
            await self.announcer.not_enough_players()
            return False

        self.session.state = GameState.ACTIVE
        self.session.started_at = datetime.now(timezone.utc)
        self.session.game_id = await self.store.create_game(self.context_id)
        logger.info(
            "Game %s started in context %s with %d players",
            self.session.game_id, self.context_id, len(self.session.players)
        )

        await self.announcer.roster(self.session)
        self._schedule(self.first_round_delay, self.play_round)
        return True

    # Rounds
    async def play_round(self):
        """Play the current round, then finish or schedule the next one."""
        session = self.session
        if session.state != GameState.ACTIVE:
            return

        if session.is_terminal:
            await self.finish()
            return

        logger.info("Starting round %d in context %s", session.round_number, self.context_id)
        started = self.clock()

        outcome = run_round(session, self.phrases, self.rng)
        await self.announcer.round_played(outcome, session)

        revived = maybe_revive(session, self.revive_chance, self.rng)
        if revived is not None:
            await self.announcer.revived(revived)

        elapsed = self.clock() - started
        logger.info(
            "Round %d in context %s completed in %dms",
            session.round_number, self.context_id, elapsed * 1000
        )
        if elapsed > self.round_budget:
            logger.warning(
                "Round %d in context %s took %.1fs, over the %ss budget",
                session.round_number, self.context_id, elapsed, self.round_budget
            )
            await self.announcer.round_overrun(session.round_number, elapsed)

        if session.is_terminal:
            await self.finish()
            return

        session.round_number += 1
        self._schedule(self.round_interval, self.play_round)

    # Results
    async def finish(self) -> GameResults:
        """Announce results, record them and reset the session."""
        session = self.session
        session.state = GameState.FINISHED

        results = finalize(session)
        await self.announcer.winner(results.winner)
        await self.announcer.results(results)

        for update in results.updates:
            await self.store.update_leaderboard(
                update.player,
                self.context_id,
                wins=update.wins,
                kills=update.kills,
                revives=update.revives
            )
        await self.store.increment_games_played()
        if results.winner is not None and results.game_id is not None:
            await self.store.update_game_winner(results.game_id, results.winner.player_id)

        duration = 0.0
        if session.started_at is not None:
            duration = (datetime.now(timezone.utc) - session.started_at).total_seconds()
        logger.info(
            "Game %s in context %s finished after %d rounds in %.1fs, winner: %s",
            results.game_id, self.context_id, session.round_number, duration,
            results.winner.username if results.winner else None
        )

        session.reset()
        session.games_played += 1
        return results
