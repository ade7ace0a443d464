"""Discord bot client setup."""

import discord
from discord.ext import commands

from game.session_manager import GameRegistry


def create_bot(store, phrases) -> commands.Bot:
    """Create and configure Discord bot.

    The counter store, phrase corpus and game registry hang off the bot so
    cogs and event handlers share them.
    """
    # Set up intents
    intents = discord.Intents.default()
    intents.message_content = True
    intents.guilds = True
    intents.guild_reactions = True
    intents.members = True
    
    # Create bot (command_prefix is required even if we only use slash commands)
    bot = commands.Bot(command_prefix='!', intents=intents)
    bot.db_manager = store
    bot.phrases = phrases
    bot.game_registry = GameRegistry(store, phrases)
    
    return bot
