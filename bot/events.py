"""Discord bot event handlers."""

import logging

import discord
from discord import app_commands
from discord.ext import commands

logger = logging.getLogger(__name__)


def setup_events(bot: commands.Bot):
    """Set up event handlers for the bot."""
    
    @bot.event
    async def on_ready():
        """Called when bot is ready."""
        logger.info("%s has connected to Discord!", bot.user)
        logger.info("Bot is in %d guilds", len(bot.guilds))
        
        for guild in bot.guilds:
            bot.game_registry.get_or_create(str(guild.id))
        await bot.db_manager.update_total_servers(len(bot.guilds))
        
        # Sync slash commands with Discord (can take up to 1 hour to show up)
        try:
            synced = await bot.tree.sync()
            logger.info("Synced %d command(s) globally to Discord", len(synced))
        except discord.HTTPException:
            logger.exception("Failed to sync commands globally")
        
        logger.info("Bot is ready with %d phrases loaded", len(bot.phrases))
    
    @bot.event
    async def on_guild_join(guild: discord.Guild):
        """Prepare a game slot for a new server."""
        bot.game_registry.get_or_create(str(guild.id))
        await bot.db_manager.update_total_servers(len(bot.guilds))
    
    @bot.event
    async def on_guild_remove(guild: discord.Guild):
        """Drop a server's game, cancelling anything it had running."""
        bot.game_registry.remove(str(guild.id))
        await bot.db_manager.update_total_servers(len(bot.guilds))
    
    @bot.event
    async def on_error(event, *args, **kwargs):
        """Handle errors."""
        logger.exception("Error in %s", event)
    
    @bot.tree.error
    async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Handle application command errors."""
        if isinstance(error, app_commands.CheckFailure):
            await interaction.response.send_message("You don't have permission to use this command.", ephemeral=True)
        elif isinstance(error, app_commands.CommandOnCooldown):
            await interaction.response.send_message(f"This command is on cooldown. Try again in {error.retry_after:.1f} seconds.", ephemeral=True)
        else:
            logger.error("Error in command %s", interaction.command.name if interaction.command else None, exc_info=error)
            if not interaction.response.is_done():
                await interaction.response.send_message("There was an error while executing this command!", ephemeral=True)
            else:
                await interaction.followup.send("There was an error while executing this command!", ephemeral=True)
