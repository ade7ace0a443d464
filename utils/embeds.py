"""Discord embed builders for bot responses."""

import discord
from typing import Optional, List, Dict

import config
from game.results import GameResults
from game.round_engine import RoundOutcome
from game.session import GameSession
from utils.formatters import chunk_lines, format_count, format_mentions, truncate_text

# Discord limits per embed
EMBED_CHAR_LIMIT = 6000
EMBED_FIELD_LIMIT = 25


def create_lobby_embed(join_window: float) -> discord.Embed:
    """Create embed for the join message."""
    return discord.Embed(
        title=f"React to this message within {join_window:g} seconds to join the game!",
        description=f"React with {config.JOIN_EMOJI} to enter the arena.",
        color=config.LOBBY_COLOR
    )


def create_roster_embed(session: GameSession) -> discord.Embed:
    """Create embed announcing the players of a game that is about to start."""
    embed = discord.Embed(
        title="The game is about to start!",
        description=f"Players: {format_mentions([p.player_id for p in session.players])}",
        color=config.ROSTER_COLOR
    )
    if session.game_id is not None:
        embed.set_footer(text=f"Game ID: {session.game_id}")
    return embed


def _round_embed(round_number: int, continued: bool) -> discord.Embed:
    title = f"Round {round_number}"
    if continued:
        title += " (continued)"
    return discord.Embed(title=title, color=config.ROUND_COLOR)


def create_round_embeds(outcome: RoundOutcome, game_id: Optional[int] = None) -> List[discord.Embed]:
    """
    Create the embeds for one round.

    Narrative lines are packed into fields within Discord's field limit. A
    field that would push an embed past Discord's size caps starts a new
    "continued" embed instead.
    """
    footer = f"Game ID: {game_id}" if game_id is not None else ""

    fields = [("\u200b", chunk) for chunk in chunk_lines(outcome.narrative_lines)]
    players_left = ", ".join(p.username for p in outcome.remaining)
    if players_left:
        fields.append(("Players left", truncate_text(players_left, 1024)))

    embeds = [_round_embed(outcome.round_number, continued=False)]
    for name, value in fields:
        embed = embeds[-1]
        too_long = len(embed) + len(name) + len(value) + len(footer) > EMBED_CHAR_LIMIT
        if embed.fields and (too_long or len(embed.fields) >= EMBED_FIELD_LIMIT):
            embed = _round_embed(outcome.round_number, continued=True)
            embeds.append(embed)
        embed.add_field(name=name, value=value, inline=False)

    if footer:
        embeds[-1].set_footer(text=footer)

    return embeds


def _format_ranking(entries, noun: str) -> str:
    if not entries:
        return "None"
    return ", ".join(
        f"{player.mention} with {format_count(count, noun)}"
        for player, count in entries
    )


def create_results_embed(results: GameResults) -> discord.Embed:
    """Create embed for the end of game summary."""
    embed = discord.Embed(
        title="Game Results",
        color=config.RESULTS_COLOR
    )
    embed.add_field(
        name="Runners Up",
        value=", ".join(p.username for p in results.runners_up) or "None",
        inline=False
    )
    embed.add_field(
        name="Most Kills",
        value=_format_ranking(results.top_killers, "kill"),
        inline=False
    )
    embed.add_field(
        name="Most Revives",
        value=_format_ranking(results.top_revivers, "revive"),
        inline=False
    )
    if results.game_id is not None:
        embed.set_footer(text=f"Game ID: {results.game_id}")
    return embed


def create_leaderboard_embed(
    entries: List[Dict],
    server_name: str,
    order_by: str = 'wins',
    total_games: Optional[int] = None
) -> discord.Embed:
    """Create embed for a server leaderboard."""
    embed = discord.Embed(
        title=f"🏆 {server_name} Leaderboard - {order_by.capitalize()}",
        color=discord.Color.gold()
    )
    if total_games is not None:
        embed.set_footer(text=f"{total_games:,} games played across all servers")

    if not entries:
        embed.description = "No games have been played here yet. Start one with `/startrr`!"
        return embed

    medals = {1: "🥇", 2: "🥈", 3: "🥉"}
    lines = []
    for rank, entry in enumerate(entries, 1):
        prefix = medals.get(rank, f"**{rank}.**")
        lines.append(
            f"{prefix} {entry['username']} - "
            f"{format_count(entry['wins'], 'win')}, "
            f"{format_count(entry['kills'], 'kill')}, "
            f"{format_count(entry['revives'], 'revive')}"
        )
    embed.description = "\n".join(lines)[:4096]
    return embed


def create_player_stats_embed(stats: Dict, display_name: str) -> discord.Embed:
    """Create embed for one player's totals."""
    embed = discord.Embed(
        title=f"📊 {display_name}'s Battle Royale Stats",
        color=discord.Color.blue()
    )

    games = stats['games_played']
    win_rate = (stats['wins'] / games * 100) if games > 0 else 0

    embed.add_field(name="Games Played", value=str(games), inline=True)
    embed.add_field(name="Wins", value=f"{stats['wins']} ({win_rate:.1f}%)", inline=True)
    embed.add_field(name="Kills", value=str(stats['kills']), inline=True)
    embed.add_field(name="Revives", value=str(stats['revives']), inline=True)
    return embed
