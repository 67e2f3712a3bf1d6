import asyncio
import logging

import aiohttp
import discord


logger = logging.getLogger(__name__)


class ChannelDispatcher:
    """Best-effort text delivery to a Discord channel by id."""

    def __init__(self, bot):
        self.bot = bot

    async def _resolve_channel(self, chat_id):
        channel = self.bot.get_channel(int(chat_id))
        if channel is None:
            channel = await self.bot.fetch_channel(int(chat_id))
        return channel

    async def send(self, chat_id, text):
        """Send `text` to `chat_id`; return False instead of raising on failure."""
        try:
            channel = await self._resolve_channel(chat_id)
            if not isinstance(channel, discord.abc.Messageable):
                logger.error("Channel %s is not messageable (%r)", chat_id, channel)
                return False
            await channel.send(text)
            return True
        except (
            discord.DiscordException,
            aiohttp.ClientError,
            OSError,
            asyncio.TimeoutError,
        ):
            logger.exception("Failed to send message to channel %s", chat_id)
            return False
