"""Phrase template resolution.

A phrase template is a line of narrative text such as
``"<username> was killed by <killer>!"``. Resolving it against an actor and a
pool of other living players fills in the markers and decides whether the
actor dies this round.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Optional, Sequence

import config
from game.errors import ResolutionError
from game.session import Player

logger = logging.getLogger(__name__)

MARKER_PATTERN = re.compile("|".join(
    re.escape(marker)
    for marker in (config.ACTOR_MARKER, config.TARGET_MARKER, config.KILLER_MARKER)
))


@dataclass
class ResolvedPhrase:
    """Outcome of resolving one template for one actor."""
    text: str
    is_lethal: bool
    killer_id: Optional[str] = None
    target_id: Optional[str] = None


def is_lethal_template(template: str) -> bool:
    """Check the template's fixed text for death vocabulary."""
    return any(keyword in template for keyword in config.DEATH_KEYWORDS)


def sample_candidate(pool: Sequence[Player], rng: random.Random) -> Player:
    """Pick one player uniformly from the eligible pool."""
    if not pool:
        raise ResolutionError("no eligible player to substitute")
    return rng.choice(list(pool))


def _bold(name: str) -> str:
    return f"**{name}**"


def _pick(
    template: str,
    marker: str,
    pool: Sequence[Player],
    rng: random.Random
) -> Optional[Player]:
    """Sample the player a marker stands for, or None if nobody is eligible."""
    if marker not in template:
        return None

    try:
        return sample_candidate(pool, rng)
    except ResolutionError:
        logger.warning("Could not resolve %s in phrase %r, no candidates left", marker, template)
        return None


def resolve_phrase(
    template: str,
    actor: Player,
    pool: Sequence[Player],
    rng: Optional[random.Random] = None
) -> ResolvedPhrase:
    """
    Expand a template for an actor.

    Markers are replaced in a single pass over the template, so a player
    name that looks like a marker is never expanded again.

    Args:
        template: Narrative template with optional actor/target/killer markers
        actor: The player the line is about
        pool: Players eligible as target or killer (actor and players
            eliminated earlier this round are filtered out again here)
        rng: Random source, defaults to the module level generator

    Returns:
        ResolvedPhrase. ``killer_id`` is only set when the template is lethal,
        since a surviving actor has no killer to credit.
    """
    rng = rng or random
    lethal = is_lethal_template(template)
    candidates = [p for p in pool if p.player_id != actor.player_id]

    target = _pick(template, config.TARGET_MARKER, candidates, rng)
    killer = _pick(template, config.KILLER_MARKER, candidates, rng)

    # Dead actors are named plainly, survivors get bolded
    names = {
        config.ACTOR_MARKER: actor.username if lethal else _bold(actor.username),
        config.TARGET_MARKER: _bold(target.username) if target else config.UNKNOWN_PLAYER_NAME,
        config.KILLER_MARKER: _bold(killer.username) if killer else config.UNKNOWN_PLAYER_NAME,
    }
    text = MARKER_PATTERN.sub(lambda match: names[match.group(0)], template)

    return ResolvedPhrase(
        text=text,
        is_lethal=lethal,
        killer_id=killer.player_id if (lethal and killer) else None,
        target_id=target.player_id if target else None,
    )
