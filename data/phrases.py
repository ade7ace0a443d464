"""Narrative phrase corpus for battle royale rounds.

Each phrase may use ``<username>`` for the player it is about, ``<target>``
for another living player and ``<killer>`` for whoever gets credit if the
phrase is deadly.
"""

from typing import List, Optional
import json
import os
import random

# Built-in phrases
PHRASES = [
    # Deadly
    "<username> was killed by <killer>!",
    "<username> drowned while trying to escape <killer>.",
    "<killer> pushed <username> off a cliff and <username> died on impact.",
    "<username> was crushed by a falling supply crate dropped by <killer>.",
    "<username> was impaled by <killer>'s homemade spear.",
    "<killer> fatally poisoned <username>'s water bottle.",
    "<username> was buried alive by <killer> during a landslide.",
    "<username> tripped over a root and died. Nobody saw it coming.",
    "<username> drowned trying to cross the river.",
    "<username> ate some strange berries and died.",
    "<username> was crushed by a falling tree.",
    "<username> was killed by a swarm of tracker jackers while <target> watched.",
    "<killer> ambushed <username> at the cornucopia, resulting in their death.",
    "<username> stepped on a landmine and died instantly.",
    "<username> was fatally wounded by <killer> while hiding from <target>.",

    # Survivable
    "<username> found a backpack full of supplies.",
    "<username> set up camp near the lake.",
    "<username> and <target> formed an alliance.",
    "<username> stole <target>'s sleeping bag.",
    "<username> ran away from <killer>.",
    "<username> spent the round hunting for food.",
    "<username> climbed a tree to spot <target>.",
    "<username> sprained an ankle but kept going.",
    "<username> received a gift from a sponsor.",
    "<username> narrowly escaped a trap set by <killer>.",
    "<username> thinks about home.",
    "<username> and <target> split the last can of beans.",
    "<username> sharpened a stick.",
    "<username> hid in a bush while <target> walked past.",
    "<username> fought <target> but both managed to get away.",
]


def load_phrases(path: Optional[str] = None) -> List[str]:
    """
    Load the phrase corpus.

    Args:
        path: JSON file holding an array of phrase strings. Defaults to the
            PHRASES_PATH environment variable; the built-in list is used when
            neither is set.

    Returns:
        List of phrase templates

    Raises:
        ValueError: If the file does not hold a non-empty list of strings
    """
    path = path or os.getenv("PHRASES_PATH")
    if not path:
        return list(PHRASES)

    with open(path, 'r', encoding='utf-8') as f:
        phrases = json.load(f)

    if not isinstance(phrases, list) or not phrases:
        raise ValueError(f"Phrase file {path} must hold a non-empty JSON array")
    if not all(isinstance(p, str) for p in phrases):
        raise ValueError(f"Phrase file {path} must only contain strings")

    return phrases


def get_random_phrase(phrases: List[str], rng=None) -> str:
    """Get a random phrase. Draws are independent, with replacement."""
    return (rng or random).choice(phrases)
