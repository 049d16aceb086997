"""
Discord message posting for leaderboard pages.

Handles:
- Building the embed for one leaderboard page
- Editing, sending and deleting page messages in the leaderboard channel
- Resolving the configured leaderboard channel
"""

import logging

import discord

from datetime import datetime, timezone
from typing import Optional

from apps.ranked_leaderboard_bot.common.constants import (
    EMBED_DESCRIPTION_MAX_LENGTH,
    LEADERBOARD_COLOR,
    LEADERBOARD_FOOTER,
    LEADERBOARD_TITLE,
)
from apps.ranked_leaderboard_bot.leaderboard import (
    LeaderboardPage,
    PagePublishError,
    StalePageError,
    clamp_page_body,
)

logger = logging.getLogger(__name__)


def build_leaderboard_page_embed(
    page: LeaderboardPage,
    updated_timestamp: Optional[datetime] = None,
) -> discord.Embed:
    """
    Build the embed for one leaderboard page.

    Args:
        page: The page to render
        updated_timestamp: Time shown in the embed, defaults to now

    Returns:
        discord.Embed with the page body as description and a "Page i/N" footer
    """
    embed = discord.Embed(
        title=LEADERBOARD_TITLE,
        description=clamp_page_body(page.body, EMBED_DESCRIPTION_MAX_LENGTH),
        color=LEADERBOARD_COLOR,
        timestamp=updated_timestamp or datetime.now(timezone.utc),
    )
    embed.set_footer(text=f"{LEADERBOARD_FOOTER} • Page {page.number}/{page.total}")
    return embed


class DiscordChannelSurface:
    """Publishes leaderboard pages as embed messages in one text channel."""

    def __init__(self, channel: discord.abc.Messageable, updated_timestamp: Optional[datetime] = None) -> None:
        self.channel = channel
        self.updated_timestamp = updated_timestamp or datetime.now(timezone.utc)

    async def _fetch(self, message_id: int) -> discord.Message:
        try:
            return await self.channel.fetch_message(message_id)
        except discord.NotFound as e:
            raise StalePageError(message_id) from e
        except discord.HTTPException as e:
            raise PagePublishError(f"Could not fetch message {message_id}: {e}") from e

    async def update_page(self, message_id: int, page: LeaderboardPage) -> int:
        message = await self._fetch(message_id)
        try:
            edited = await message.edit(content=None, embed=build_leaderboard_page_embed(page, self.updated_timestamp))
        except discord.NotFound as e:
            raise StalePageError(message_id) from e
        except discord.HTTPException as e:
            raise PagePublishError(f"Could not edit message {message_id}: {e}") from e
        return edited.id if edited is not None else message_id

    async def create_page(self, page: LeaderboardPage) -> int:
        try:
            sent = await self.channel.send(embed=build_leaderboard_page_embed(page, self.updated_timestamp))
        except discord.HTTPException as e:
            raise PagePublishError(f"Could not send page {page.number}/{page.total}: {e}") from e
        logger.info(f"Posted leaderboard page {page.number}/{page.total} as message {sent.id}")
        return sent.id

    async def delete_page(self, message_id: int) -> None:
        message = await self._fetch(message_id)
        try:
            await message.delete()
        except discord.NotFound as e:
            raise StalePageError(message_id) from e
        except discord.HTTPException as e:
            raise PagePublishError(f"Could not delete message {message_id}: {e}") from e
        logger.info(f"Deleted extra leaderboard message {message_id}")


async def resolve_leaderboard_channel(
    bot: discord.Client,
    channel_id: Optional[int],
) -> Optional[discord.abc.Messageable]:
    """Return the configured leaderboard channel, or None if unset or unreachable."""
    if not channel_id:
        logger.warning("DISCORD_LEADERBOARD_CHANNEL_ID not configured, skipping leaderboard posting")
        return None

    channel = bot.get_channel(channel_id)
    if channel is not None:
        return channel

    try:
        return await bot.fetch_channel(channel_id)
    except discord.NotFound:
        logger.error(f"Channel {channel_id} not found")
    except discord.Forbidden:
        logger.error(f"No permission to access channel {channel_id}")
    except discord.HTTPException as e:
        logger.error(f"Error fetching channel {channel_id}: {e}", exc_info=True)
    return None
