"""End of game results."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import config
from game.session import GameSession, Player


@dataclass
class LeaderboardUpdate:
    """Counter deltas for one player at the end of a game."""
    player: Player
    wins: int
    kills: int
    revives: int


@dataclass
class GameResults:
    """Final summary of a game."""
    game_id: Optional[int]
    winner: Optional[Player]
    runners_up: List[Player] = field(default_factory=list)
    top_killers: List[Tuple[Player, int]] = field(default_factory=list)
    top_revivers: List[Tuple[Player, int]] = field(default_factory=list)
    updates: List[LeaderboardUpdate] = field(default_factory=list)


def _rank(session: GameSession, counts: Dict[str, int], limit: int) -> List[Tuple[Player, int]]:
    """Rank joiners by a counter, highest first. Ties keep join order."""
    ranked = sorted(
        session.joiners,
        key=lambda p: counts.get(p.player_id, 0),
        reverse=True
    )
    return [(p, counts.get(p.player_id, 0)) for p in ranked[:limit]]


def finalize(session: GameSession, podium_size: int = config.PODIUM_SIZE) -> GameResults:
    """
    Build the results of a finished game.

    Must run before the session is reset: the winner is read from the active
    roster.
    """
    winner = session.players[0] if len(session.players) == 1 else None

    # Most recently eliminated first
    runners_up = list(reversed(session.dead_players[-podium_size:])) if podium_size else []

    seen = set()
    updates = []
    for player in session.players + session.dead_players:
        if player.player_id in seen:
            continue
        seen.add(player.player_id)
        updates.append(LeaderboardUpdate(
            player=player,
            wins=1 if winner is not None and player.player_id == winner.player_id else 0,
            kills=session.kill_counts.get(player.player_id, 0),
            revives=session.revive_counts.get(player.player_id, 0),
        ))

    return GameResults(
        game_id=session.game_id,
        winner=winner,
        runners_up=runners_up,
        top_killers=_rank(session, session.kill_counts, podium_size),
        top_revivers=_rank(session, session.revive_counts, podium_size),
        updates=updates,
    )
