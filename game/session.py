"""Game session data structures."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict


class GameState(str, Enum):
    """Lifecycle states of a game session."""
    IDLE = 'idle'
    LOBBY = 'lobby'
    ACTIVE = 'active'
    FINISHED = 'finished'


@dataclass(frozen=True)
class Player:
    """A joiner. Identity is the id; the name is a snapshot taken at join time."""
    player_id: str
    username: str = field(compare=False)

    @property
    def mention(self) -> str:
        return f"<@{self.player_id}>"


@dataclass
class GameSession:
    """Represents the battle royale state of one chat context (guild).

    The same instance is reused for every game played in the context.
    """
    context_id: str

    # Lifecycle
    state: GameState = GameState.IDLE
    game_id: Optional[int] = None
    round_number: int = 1
    lobby_message_id: Optional[int] = None

    # Roster, in join order and in elimination order
    joiners: List[Player] = field(default_factory=list)
    players: List[Player] = field(default_factory=list)
    dead_players: List[Player] = field(default_factory=list)

    # Stats for the current game, keyed by player id
    kill_counts: Dict[str, int] = field(default_factory=dict)
    revive_counts: Dict[str, int] = field(default_factory=dict)

    # Games completed in this context since the process started
    games_played: int = 0

    # Timestamps
    started_at: Optional[datetime] = None

    def add_player(self, player: Player) -> bool:
        """Add a joiner. Returns False if the player had already joined."""
        if any(p.player_id == player.player_id for p in self.joiners):
            return False
        self.joiners.append(player)
        self.players.append(player)
        self.kill_counts[player.player_id] = 0
        self.revive_counts[player.player_id] = 0
        return True

    @property
    def is_terminal(self) -> bool:
        return len(self.players) <= 1

    def reset(self):
        """Clear the roster and counters and return to Idle."""
        self.state = GameState.IDLE
        self.game_id = None
        self.round_number = 1
        self.lobby_message_id = None
        self.joiners = []
        self.players = []
        self.dead_players = []
        self.kill_counts = {}
        self.revive_counts = {}
        self.started_at = None
