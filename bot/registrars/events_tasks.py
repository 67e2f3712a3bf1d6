import logging
import sys

import discord
from discord import app_commands
from discord.ext import commands


logger = logging.getLogger(__name__)


def register_events_and_tasks(bot, deps):
    """Register Discord lifecycle events and error handlers."""
    APP_GUILD_ID = deps["APP_GUILD_ID"]

    @bot.event
    async def on_ready():
        """Sync slash commands once the gateway session is up."""
        logger.info("🤖 Bot started as %s", bot.user)

        try:
            # Ưu tiên guild sync khi có APP_GUILD_ID để cập nhật command gần như ngay lập tức.
            if APP_GUILD_ID:
                guild = discord.Object(id=APP_GUILD_ID)
                bot.tree.copy_global_to(guild=guild)
                synced = await bot.tree.sync(guild=guild)
                logger.info(
                    "Synced %d slash command(s) to guild %s", len(synced), APP_GUILD_ID
                )
            else:
                synced = await bot.tree.sync()
                logger.info("Synced %d global slash command(s)", len(synced))
        except discord.DiscordException:
            logger.exception("Slash command sync failed")

    @bot.event
    async def on_error(event_method, *args, **kwargs):
        """Log exceptions escaping any event handler instead of dying silently."""
        logger.error(
            "Unhandled error in event %s", event_method, exc_info=sys.exc_info()
        )

    @bot.event
    async def on_command_error(ctx, error):
        """Log prefix command failures; unknown commands are ignored."""
        if isinstance(error, commands.CommandNotFound):
            return
        if isinstance(error, commands.UserInputError):
            await ctx.send(f"⚠️ {error}")
            return
        logger.error(
            "Command %s failed in channel %s",
            ctx.command,
            ctx.channel.id if ctx.channel else None,
            exc_info=(type(error), error, error.__traceback__),
        )

    @bot.tree.error
    async def on_app_command_error(
        interaction: discord.Interaction, error: app_commands.AppCommandError
    ):
        """Log slash command failures and tell the user something went wrong."""
        logger.error(
            "Slash command %s failed in channel %s",
            interaction.command.name if interaction.command else None,
            interaction.channel_id,
            exc_info=(type(error), error, error.__traceback__),
        )
        try:
            if interaction.response.is_done():
                await interaction.followup.send("⚠️ Что-то пошло не так.", ephemeral=True)
            else:
                await interaction.response.send_message(
                    "⚠️ Что-то пошло не так.", ephemeral=True
                )
        except discord.DiscordException:
            logger.exception("Could not report slash command error")
