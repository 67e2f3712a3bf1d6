import asyncio
import logging
import signal

import discord
import pytz
from discord.ext import commands

from bot.config.settings import (
    APP_GUILD_ID,
    BOT_TIMEZONE,
    COMMAND_PREFIX,
    DISCORD_TOKEN,
    LOG_LEVEL,
    TARGET_CHANNEL_ID,
)
from bot.state.runtime import ChatRegistry
from bot.services import (
    ChannelDispatcher,
    ReminderScheduler,
    apply_set_windows,
    clear_reminders,
    describe_windows,
    mirror_confirmation,
)
from bot.utils import build_help_embed
from bot.registrars import (
    register_events_and_tasks,
    register_prefix_commands,
    register_slash_commands,
)


logger = logging.getLogger(__name__)


intents = discord.Intents.default()
intents.message_content = True
intents.guilds = True
bot = commands.Bot(
    command_prefix=commands.when_mentioned_or(COMMAND_PREFIX), intents=intents
)
bot.remove_command("help")


def _resolve_timezone(name):
    """pytz zone for wall-clock reminders; None means server local time."""
    if not name:
        return None
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown BOT_TIMEZONE %r, using server local time", name)
        return None


dispatcher = ChannelDispatcher(bot)
scheduler = ReminderScheduler(dispatcher, registry=ChatRegistry())


register_events_and_tasks(
    bot,
    {
        "APP_GUILD_ID": APP_GUILD_ID,
    },
)

_command_deps = {
    "scheduler": scheduler,
    "dispatcher": dispatcher,
    "TARGET_CHANNEL_ID": TARGET_CHANNEL_ID,
    "COMMAND_PREFIX": COMMAND_PREFIX,
    "apply_set_windows": apply_set_windows,
    "mirror_confirmation": mirror_confirmation,
    "describe_windows": describe_windows,
    "clear_reminders": clear_reminders,
    "build_help_embed": build_help_embed,
}
register_prefix_commands(bot, _command_deps)
register_slash_commands(bot, _command_deps)


def _log_loop_exception(loop, context):
    """Last-resort logging for exceptions nobody awaited."""
    logger.error(
        "Unhandled asyncio error: %s",
        context.get("message"),
        exc_info=context.get("exception"),
    )


def _stop_on_signal(reminders, client, closing, signame):
    """Cancel every reminder, then close `client` once per process."""
    logger.info("Received %s, cancelling reminders and closing bot", signame)
    reminders.shutdown()
    if not closing:
        closing.append(asyncio.get_running_loop().create_task(client.close()))


async def _main():
    loop = asyncio.get_running_loop()
    loop.set_exception_handler(_log_loop_exception)
    closing = []

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(
                sig, _stop_on_signal, scheduler, bot, closing, sig.name
            )
        except NotImplementedError:
            pass

    try:
        async with bot:
            await bot.start(DISCORD_TOKEN)
    finally:
        scheduler.shutdown()


def run():
    """Validate required config and start the Discord bot runtime."""
    if not DISCORD_TOKEN:
        raise SystemExit("❌ Missing DISCORD_TOKEN (set it in the environment or .env)")

    discord.utils.setup_logging(level=getattr(logging, LOG_LEVEL, logging.INFO))
    scheduler.tz = _resolve_timezone(BOT_TIMEZONE)
    logger.info("🚀 Bot starting...")
    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("Interrupted, bot stopped")
