"""
Scheduled task that keeps the published leaderboard up to date.

Refreshes every player's rank and republishes the leaderboard pages every
15 minutes (LEADERBOARD_REFRESH_MINUTES), starting as soon as the bot is ready.

This module serves as the main entry point for the leaderboard refresh job,
wiring the refresher to the bot, the Riot API and the leaderboard channel.
"""

import logging

import discord

from typing import Optional

from apps.ranked_leaderboard_bot.bot_config import DiscordBotConfig
from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh.posting import (
    DiscordChannelSurface,
    resolve_leaderboard_channel,
)
from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh.refresh_job import LeaderboardRefresher
from apps.ranked_leaderboard_bot.storage import PublishStateStore, RosterStore
from libs.riot_api import RiotApiClient

logger = logging.getLogger(__name__)


def create_leaderboard_refresher(
    bot: discord.Client,
    bot_config: DiscordBotConfig,
    riot_client: RiotApiClient,
    roster: RosterStore,
    publish_state: PublishStateStore,
) -> LeaderboardRefresher:
    """Build the refresher publishing to the configured leaderboard channel."""

    async def surface_provider() -> Optional[DiscordChannelSurface]:
        channel = await resolve_leaderboard_channel(bot, bot_config.leaderboard_channel_id)
        if channel is None:
            return None
        return DiscordChannelSurface(channel)

    return LeaderboardRefresher(
        roster=roster,
        publish_state=publish_state,
        rank_fetcher=riot_client.get_solo_rank,
        surface_provider=surface_provider,
        fetch_timeout=bot_config.fetch_timeout_seconds,
        max_concurrent_fetches=bot_config.fetch_concurrency,
        refresh_minutes=bot_config.refresh_minutes,
    )


def setup_leaderboard_refresh_task(bot: discord.Client, refresher: LeaderboardRefresher) -> None:
    """Start the scheduled leaderboard refresh task once the bot is ready."""

    @refresher.refresh_loop.before_loop
    async def before_refresh():
        await bot.wait_until_ready()
        logger.info("Leaderboard refresh task ready")

    refresher.start()
