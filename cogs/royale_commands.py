"""Battle royale game commands."""

import logging

import discord
from discord import app_commands
from discord.ext import commands

import config
from bot.announcer import ChannelAnnouncer
from game.errors import GameInProgressError, LobbyClosedError
from game.session import GameState, Player

logger = logging.getLogger(__name__)


class RoyaleCommands(commands.Cog):
    """Starts games and turns lobby reactions into joins."""
    
    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.registry = bot.game_registry
    
    @app_commands.command(name="startrr", description="Start a new Battle Royale game")
    @app_commands.guild_only()
    async def start(self, interaction: discord.Interaction):
        """Open a lobby in this channel."""
        controller = self.registry.get_or_create(str(interaction.guild_id))
        
        if controller.state != GameState.IDLE:
            await interaction.response.send_message("❌ A game is already in progress!", ephemeral=True)
            return
        
        await interaction.response.send_message("Starting the Battle Royale game!")
        
        try:
            await controller.start_game(ChannelAnnouncer(interaction.channel))
        except GameInProgressError:
            await interaction.followup.send("❌ A game is already in progress!", ephemeral=True)
        except discord.HTTPException:
            logger.exception("Could not open lobby in guild %s", interaction.guild_id)
            await interaction.followup.send("❌ Couldn't post the lobby message. Check my permissions!", ephemeral=True)
    
    @commands.Cog.listener()
    async def on_reaction_add(self, reaction: discord.Reaction, user: discord.abc.User):
        """Join the lobby when someone reacts to its message."""
        if user.bot or str(reaction.emoji) != config.JOIN_EMOJI:
            return
        
        message = reaction.message
        if message.guild is None:
            return
        
        controller = self.registry.get(str(message.guild.id))
        if controller is None or controller.session.lobby_message_id != message.id:
            return
        
        player = Player(player_id=str(user.id), username=user.display_name)
        try:
            controller.join(player)
        except LobbyClosedError:
            await controller.announcer.lobby_closed(player)


async def setup(bot: commands.Bot):
    """Load the cog."""
    await bot.add_cog(RoyaleCommands(bot))
