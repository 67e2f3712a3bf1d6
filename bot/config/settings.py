import os

from dotenv import load_dotenv


load_dotenv()


def _parse_int(env_key, default=0):
    raw = str(os.getenv(env_key, "") or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


DISCORD_TOKEN = os.getenv("DISCORD_TOKEN")
TARGET_CHANNEL_ID = _parse_int("TARGET_CHANNEL_ID")
APP_GUILD_ID = _parse_int("APP_GUILD_ID")
COMMAND_PREFIX = os.getenv("COMMAND_PREFIX", "!").strip() or "!"
BOT_TIMEZONE = os.getenv("BOT_TIMEZONE", "").strip()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
