"""Runs a single elimination round."""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from data.phrases import get_random_phrase
from game.errors import NotEnoughPlayersError
from game.phrases import resolve_phrase
from game.session import GameSession, Player

logger = logging.getLogger(__name__)


@dataclass
class RoundOutcome:
    """What happened in one round."""
    round_number: int
    narrative_lines: List[str] = field(default_factory=list)
    eliminated: List[Player] = field(default_factory=list)
    kills: List[Tuple[str, str]] = field(default_factory=list)  # (killer_id, victim_id)
    remaining: List[Player] = field(default_factory=list)

    @property
    def remaining_count(self) -> int:
        return len(self.remaining)


def run_round(
    session: GameSession,
    phrases: Sequence[str],
    rng: Optional[random.Random] = None
) -> RoundOutcome:
    """
    Play one round over the session's active roster.

    Every active player, in roster order, gets one randomly drawn phrase.
    Lethal phrases eliminate their actor immediately, so later phrases this
    round can no longer pick that player as target or killer. Kill counters
    are credited as phrases resolve; the roster is updated at the end.
    """
    rng = rng or random
    if len(session.players) < 2:
        raise NotEnoughPlayersError(
            f"round {session.round_number} needs at least 2 players, "
            f"have {len(session.players)}"
        )

    outcome = RoundOutcome(round_number=session.round_number)
    eliminated_ids = set()

    for player in session.players:
        if player.player_id in eliminated_ids:
            continue

        pool = [
            p for p in session.players
            if p.player_id != player.player_id and p.player_id not in eliminated_ids
        ]
        template = get_random_phrase(phrases, rng)
        resolved = resolve_phrase(template, player, pool, rng)

        if resolved.is_lethal:
            eliminated_ids.add(player.player_id)
            outcome.eliminated.append(player)
            if resolved.killer_id is not None:
                session.kill_counts[resolved.killer_id] += 1
                outcome.kills.append((resolved.killer_id, player.player_id))

        outcome.narrative_lines.append(resolved.text)

    session.players = [p for p in session.players if p.player_id not in eliminated_ids]
    session.dead_players.extend(outcome.eliminated)
    outcome.remaining = list(session.players)

    logger.debug(
        "Round %d in context %s: %d eliminated, %d remaining",
        outcome.round_number, session.context_id,
        len(outcome.eliminated), outcome.remaining_count
    )
    return outcome
