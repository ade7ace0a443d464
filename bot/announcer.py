"""Sends game announcements to a Discord channel."""

from typing import Optional

import discord

import config
from game.lifecycle import Announcer
from game.results import GameResults
from game.round_engine import RoundOutcome
from game.session import GameSession, Player
from utils.embeds import (
    create_lobby_embed,
    create_roster_embed,
    create_round_embeds,
    create_results_embed
)


class ChannelAnnouncer(Announcer):
    """Announcer that posts to the channel a game was started from."""

    def __init__(self, channel: discord.abc.Messageable):
        self.channel = channel

    async def lobby_opened(self, join_window: float) -> Optional[int]:
        message = await self.channel.send(embed=create_lobby_embed(join_window))
        await message.add_reaction(config.JOIN_EMOJI)
        return message.id

    async def lobby_closed(self, player: Player):
        await self.channel.send(
            f"{player.mention} the game has already started, wait for the next one!",
            delete_after=10
        )

    async def not_enough_players(self):
        await self.channel.send("Not enough players joined the game.")

    async def roster(self, session: GameSession):
        await self.channel.send(embed=create_roster_embed(session))

    async def round_played(self, outcome: RoundOutcome, session: GameSession):
        for embed in create_round_embeds(outcome, session.game_id):
            await self.channel.send(embed=embed)

    async def revived(self, player: Player):
        await self.channel.send(f":angel: **{player.username}** has been revived!")

    async def round_overrun(self, round_number: int, elapsed: float):
        await self.channel.send("The round took too long! Moving on to the next round...")

    async def winner(self, player: Optional[Player]):
        if player is not None:
            await self.channel.send(f"{player.mention} is the winner!")
        else:
            await self.channel.send("No winners this time.")

    async def results(self, results: GameResults):
        await self.channel.send(embed=create_results_embed(results))
