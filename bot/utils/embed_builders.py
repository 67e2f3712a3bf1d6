import discord

from bot.config.constants import REMINDER_LEAD_MINUTES


def build_help_embed(prefix="!"):
    embed = discord.Embed(
        title="🤖 PR Window Bot",
        color=discord.Color.blurple(),
        description=(
            f"Напоминаю в канал за {REMINDER_LEAD_MINUTES} минут до начала "
            "окна code review, каждый день.\n"
            f"Команды работают как `/команда` и как `{prefix}команда`."
        ),
    )
    embed.add_field(
        name="`/set_windows <утро> [вечер]`",
        value="Установить окна, например `10:00-11:00 18:00-19:00`",
        inline=False,
    )
    embed.add_field(
        name="`/show_windows`", value="Показать текущие окна", inline=False
    )
    embed.add_field(
        name="`/clear_reminders`",
        value="Остановить напоминания (окна сохраняются)",
        inline=False,
    )
    embed.add_field(name="`/ping`", value="Проверить задержку бота", inline=False)
    return embed
