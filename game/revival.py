"""Per-round revival trial."""

import logging
import random
from typing import Optional

import config
from game.session import GameSession, Player

logger = logging.getLogger(__name__)


def maybe_revive(
    session: GameSession,
    chance: float = config.REVIVE_CHANCE,
    rng: Optional[random.Random] = None
) -> Optional[Player]:
    """
    Give one eliminated player a chance to return.

    A single Bernoulli trial with probability ``chance``. On success a random
    eliminated player moves back to the end of the active roster and their
    revive counter goes up by one.

    Returns:
        The revived player, or None
    """
    if not session.dead_players:
        return None

    rng = rng or random
    if rng.random() >= chance:
        return None

    index = rng.randrange(len(session.dead_players))
    player = session.dead_players.pop(index)
    session.players.append(player)
    session.revive_counts[player.player_id] += 1

    logger.info("Revived %s in context %s", player.username, session.context_id)
    return player
