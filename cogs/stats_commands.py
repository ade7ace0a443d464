"""Stats and leaderboard commands."""

import discord
from discord import app_commands
from discord.ext import commands
from typing import Optional

from utils.embeds import create_leaderboard_embed, create_player_stats_embed


class StatsCommands(commands.Cog):
    """Stats and leaderboard commands."""
    
    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.db_manager = bot.db_manager
    
    @app_commands.command(name="rrleaderboard", description="View this server's Battle Royale leaderboard")
    @app_commands.describe(ranking="What to rank players by")
    @app_commands.choices(ranking=[
        app_commands.Choice(name="Wins", value="wins"),
        app_commands.Choice(name="Kills", value="kills"),
        app_commands.Choice(name="Revives", value="revives")
    ])
    @app_commands.guild_only()
    async def leaderboard(
        self,
        interaction: discord.Interaction,
        ranking: Optional[str] = "wins"
    ):
        """View the server leaderboard."""
        entries = await self.db_manager.get_leaderboard(str(interaction.guild_id), order_by=ranking)
        global_stats = await self.db_manager.get_global_stats()
        embed = create_leaderboard_embed(
            entries,
            interaction.guild.name,
            ranking,
            total_games=global_stats['total_games_played']
        )
        await interaction.response.send_message(embed=embed)
    
    @app_commands.command(name="rrstats", description="View Battle Royale statistics")
    @app_commands.describe(user="User to view stats for (default: yourself)")
    @app_commands.guild_only()
    async def stats(
        self,
        interaction: discord.Interaction,
        user: Optional[discord.Member] = None
    ):
        """View player statistics."""
        target_user = user or interaction.user
        
        stats = await self.db_manager.get_player_stats(str(target_user.id), str(interaction.guild_id))
        
        if not stats:
            await interaction.response.send_message(f"❌ No statistics found for {target_user.mention}!", ephemeral=True)
            return
        
        embed = create_player_stats_embed(stats, target_user.display_name)
        await interaction.response.send_message(embed=embed)


async def setup(bot: commands.Bot):
    """Load the cog."""
    await bot.add_cog(StatsCommands(bot))
