from __future__ import annotations

import random

import pytest

from game.lifecycle import Announcer, GameController
from game.session import GameSession, GameState, Player


class RecordingAnnouncer(Announcer):
    """Announcer that remembers every announcement in order."""

    def __init__(self, lobby_message_id: int = 4242):
        self.lobby_message_id = lobby_message_id
        self.events: list[tuple] = []

    def names(self) -> list[str]:
        return [event[0] for event in self.events]

    def of_kind(self, name: str) -> list[tuple]:
        return [event for event in self.events if event[0] == name]

    async def lobby_opened(self, join_window):
        self.events.append(("lobby_opened", join_window))
        return self.lobby_message_id

    async def lobby_closed(self, player):
        self.events.append(("lobby_closed", player))

    async def not_enough_players(self):
        self.events.append(("not_enough_players",))

    async def roster(self, session):
        self.events.append(("roster", list(session.players)))

    async def round_played(self, outcome, session):
        self.events.append(("round_played", outcome))

    async def revived(self, player):
        self.events.append(("revived", player))

    async def round_overrun(self, round_number, elapsed):
        self.events.append(("round_overrun", round_number, elapsed))

    async def winner(self, player):
        self.events.append(("winner", player))

    async def results(self, results):
        self.events.append(("results", results))


class FakeStore:
    """In-memory stand-in for DatabaseManager."""

    def __init__(self):
        self.games: dict[int, str] = {}
        self.winners: dict[int, str] = {}
        self.leaderboard: list[dict] = []
        self.games_played = 0
        self.total_servers = 0

    async def create_game(self, guild_id):
        game_id = len(self.games) + 1
        self.games[game_id] = guild_id
        return game_id

    async def update_game_winner(self, game_id, winner_id):
        self.winners[game_id] = winner_id
        return True

    async def update_leaderboard(self, player, guild_id, wins=0, kills=0, revives=0):
        self.leaderboard.append({
            'player_id': player.player_id,
            'guild_id': guild_id,
            'wins': wins,
            'kills': kills,
            'revives': revives,
        })
        return True

    async def increment_games_played(self):
        self.games_played += 1
        return True

    async def update_total_servers(self, total_servers):
        self.total_servers = total_servers
        return True


def _make_players(*names: str) -> list[Player]:
    return [Player(player_id=str(i), username=name) for i, name in enumerate(names, 1)]


@pytest.fixture()
def make_players():
    return _make_players


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def announcer() -> RecordingAnnouncer:
    return RecordingAnnouncer()


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def session() -> GameSession:
    """An active session with Dan, Jack and Emma, in that join order."""
    s = GameSession(context_id="guild-1")
    for player in _make_players("Dan", "Jack", "Emma"):
        s.add_player(player)
    s.state = GameState.ACTIVE
    return s


@pytest.fixture()
def make_controller(store):
    """Build a controller with no delays so whole games run inside a test."""

    def _make(phrases, seed: int = 7, context_id: str = "guild-1", **kwargs) -> GameController:
        game_store = kwargs.pop("store", store)
        options = dict(
            rng=random.Random(seed),
            join_window=0,
            first_round_delay=0,
            round_interval=0,
        )
        options.update(kwargs)
        return GameController(context_id, game_store, phrases, **options)

    return _make


@pytest.fixture()
def db_path(tmp_path) -> str:
    return str(tmp_path / "royale.db")
