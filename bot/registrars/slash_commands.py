import discord
from discord import app_commands


def register_slash_commands(bot, deps):
    """Register slash commands mirroring the text commands."""
    scheduler = deps["scheduler"]
    dispatcher = deps["dispatcher"]
    TARGET_CHANNEL_ID = deps["TARGET_CHANNEL_ID"]
    COMMAND_PREFIX = deps["COMMAND_PREFIX"]

    apply_set_windows = deps["apply_set_windows"]
    mirror_confirmation = deps["mirror_confirmation"]
    describe_windows = deps["describe_windows"]
    clear_reminders = deps["clear_reminders"]
    build_help_embed = deps["build_help_embed"]

    @bot.tree.command(name="help", description="Список команд бота")
    async def slash_help(interaction: discord.Interaction):
        """Display the command guide."""
        await interaction.response.send_message(
            embed=build_help_embed(COMMAND_PREFIX), ephemeral=True
        )

    @bot.tree.command(name="ping", description="Проверить задержку бота")
    async def slash_ping(interaction: discord.Interaction):
        """Return bot heartbeat latency for quick health checks."""
        await interaction.response.send_message(
            f"🏓 Pong! {round(bot.latency * 1000)}ms", ephemeral=True
        )

    @bot.tree.command(
        name="set_windows", description="Установить одно или два окна для PR"
    )
    @app_commands.describe(
        morning="Утреннее окно, HH:MM-HH:MM (например 10:00-11:00)",
        evening="Вечернее окно, HH:MM-HH:MM (необязательно)",
    )
    async def slash_set_windows(
        interaction: discord.Interaction,
        morning: str,
        evening: str = "",
    ):
        """Store the channel's windows and (re)arm its daily reminders."""
        chat_id = interaction.channel_id
        result = apply_set_windows(scheduler, chat_id, [morning, evening])
        if not result["ok"]:
            await interaction.response.send_message(result["error"], ephemeral=True)
            return

        await interaction.response.send_message(result["reply"])
        await mirror_confirmation(dispatcher, chat_id, TARGET_CHANNEL_ID, result["reply"])

    @bot.tree.command(name="show_windows", description="Показать текущие окна для PR")
    async def slash_show_windows(interaction: discord.Interaction):
        """List the windows configured for this channel."""
        await interaction.response.send_message(
            describe_windows(scheduler, interaction.channel_id)
        )

    @bot.tree.command(
        name="clear_reminders",
        description="Остановить напоминания в канале (окна сохраняются)",
    )
    async def slash_clear_reminders(interaction: discord.Interaction):
        """Cancel this channel's reminder timers."""
        await interaction.response.send_message(
            clear_reminders(scheduler, interaction.channel_id)
        )
