from __future__ import annotations

import random

import pytest

from data.phrases import PHRASES
from game.errors import NotEnoughPlayersError
from game.round_engine import run_round
from game.session import GameSession

KILLED_BY = "<username> was killed by <killer>!"
SAFE = "<username> found a backpack full of supplies."


def test_lethal_round_eliminates_in_roster_order(session: GameSession, rng: random.Random) -> None:
    outcome = run_round(session, [KILLED_BY], rng)

    # Dan dies first, so Jack can only be killed by Emma, and Emma has nobody left
    assert [p.username for p in outcome.eliminated] == ["Dan", "Jack", "Emma"]
    assert outcome.narrative_lines[1] == "Jack was killed by **Emma**!"
    assert outcome.narrative_lines[2] == "Emma was killed by someone!"
    assert outcome.remaining_count == 0
    assert session.players == []
    assert [p.username for p in session.dead_players] == ["Dan", "Jack", "Emma"]

    assert len(outcome.kills) == 2
    assert outcome.kills[0][0] in {"2", "3"}
    assert outcome.kills[1] == ("3", "2")
    assert sum(session.kill_counts.values()) == 2


def test_safe_round_changes_nothing(session: GameSession, rng: random.Random) -> None:
    outcome = run_round(session, [SAFE], rng)

    assert outcome.eliminated == []
    assert outcome.kills == []
    assert outcome.remaining_count == 3
    assert outcome.narrative_lines[0] == "**Dan** found a backpack full of supplies."
    assert len(outcome.narrative_lines) == 3
    assert sum(session.kill_counts.values()) == 0


def test_round_needs_two_players(session: GameSession, rng: random.Random) -> None:
    session.players = session.players[:1]

    with pytest.raises(NotEnoughPlayersError):
        run_round(session, [SAFE], rng)


def test_round_does_not_advance_round_number(session: GameSession, rng: random.Random) -> None:
    outcome = run_round(session, [SAFE], rng)

    assert outcome.round_number == 1
    assert session.round_number == 1


def test_roster_invariants_hold_over_many_rounds(make_players) -> None:
    rng = random.Random(99)
    session = GameSession(context_id="guild-1")
    for player in make_players("Dan", "Jack", "Emma", "Jennifer", "Leanna", "John", "Richard", "Lee"):
        session.add_player(player)

    total_kills = 0
    while len(session.players) > 1:
        before = len(session.players)
        outcome = run_round(session, PHRASES, rng)
        victims_so_far: set[str] = set()
        for killer_id, victim_id in outcome.kills:
            victims_so_far.add(victim_id)
            # Nobody is credited with a kill after their own death or for their own death
            assert killer_id not in victims_so_far
        total_kills += len(outcome.kills)

        assert len(outcome.narrative_lines) == before
        assert len(session.players) == before - len(outcome.eliminated)

        active_ids = {p.player_id for p in session.players}
        dead_ids = {p.player_id for p in session.dead_players}
        assert not active_ids & dead_ids
        assert len(active_ids | dead_ids) == 8
        assert set(session.kill_counts) >= active_ids | dead_ids

    assert sum(session.kill_counts.values()) == total_kills
