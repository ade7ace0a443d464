from __future__ import annotations

from game.results import GameResults
from game.round_engine import RoundOutcome
from game.session import Player
from utils.embeds import create_results_embed, create_round_embeds
from utils.formatters import chunk_lines, format_count

DAN = Player(player_id="1", username="Dan")
JACK = Player(player_id="2", username="Jack")


def test_chunk_lines_respects_limit() -> None:
    lines = ["x" * 400] * 5

    chunks = chunk_lines(lines, max_length=1024)

    assert [len(c) for c in chunks] == [801, 801, 400]
    assert chunk_lines([]) == []
    assert chunk_lines(["y" * 2000], max_length=1024)[0].endswith("...")


def test_format_count() -> None:
    assert format_count(1, "kill") == "1 kill"
    assert format_count(0, "kill") == "0 kills"


def test_round_embed_lists_lines_and_survivors() -> None:
    outcome = RoundOutcome(
        round_number=3,
        narrative_lines=["Dan was killed by **Jack**!", "**Jack** sharpened a stick."],
        eliminated=[DAN],
        remaining=[JACK],
    )

    [embed] = create_round_embeds(outcome, game_id=9)

    assert embed.title == "Round 3"
    assert embed.fields[0].value == "Dan was killed by **Jack**!\n**Jack** sharpened a stick."
    assert embed.fields[-1].name == "Players left"
    assert embed.fields[-1].value == "Jack"
    assert embed.footer.text == "Game ID: 9"


def test_long_rounds_spill_into_more_embeds() -> None:
    outcome = RoundOutcome(round_number=1, narrative_lines=["z" * 1000] * 12, remaining=[DAN, JACK])

    embeds = create_round_embeds(outcome)

    assert len(embeds) == 3
    assert embeds[1].title == "Round 1 (continued)"
    assert all(len(e) <= 6000 for e in embeds)
    assert embeds[-1].fields[-1].value == "Dan, Jack"


def test_large_roster_rounds_stay_within_discord_limits() -> None:
    players = [Player(player_id=str(i), username=f"{i:02d}" + "x" * 30) for i in range(80)]
    lines = [f"**{p.username}** sharpened a stick.".ljust(128, ".") for p in players]
    outcome = RoundOutcome(round_number=4, narrative_lines=lines, remaining=players)

    embeds = create_round_embeds(outcome, game_id=123)

    assert len(embeds) > 1
    assert all(len(e) <= 6000 for e in embeds)
    assert all(len(e.fields) <= 25 for e in embeds)

    narrative = "\n".join(f.value for e in embeds for f in e.fields if f.name != "Players left")
    assert narrative == "\n".join(lines)

    players_left = embeds[-1].fields[-1]
    assert players_left.name == "Players left"
    assert len(players_left.value) <= 1024
    assert embeds[-1].footer.text == "Game ID: 123"


def test_results_embed() -> None:
    results = GameResults(
        game_id=4,
        winner=JACK,
        runners_up=[DAN],
        top_killers=[(JACK, 1), (DAN, 0)],
        top_revivers=[],
    )

    embed = create_results_embed(results)

    values = {field.name: field.value for field in embed.fields}
    assert values["Runners Up"] == "Dan"
    assert values["Most Kills"] == "<@2> with 1 kill, <@1> with 0 kills"
    assert values["Most Revives"] == "None"
    assert embed.footer.text == "Game ID: 4"
