"""
Roster commands for Discord bot.

This module contains the roster management commands:
- /add: Track a player on the leaderboard by Riot ID
- /roster: List the tracked players and their current rank
"""

import asyncio
import logging
import time
from typing import Optional, Tuple

import discord
from discord import app_commands

from apps.ranked_leaderboard_bot.common import (
    build_table_message,
    command_wrapper,
    log_command_completion,
    validate_riot_id,
)
from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh import LeaderboardRefresher
from apps.ranked_leaderboard_bot.leaderboard import format_rank_summary, sort_leaderboard
from apps.ranked_leaderboard_bot.storage import RosterStore
from libs.riot_api import RankInfo, RiotApiClient, RiotApiError

logger = logging.getLogger(__name__)


def player_not_found_error(game_name: str, tag_line: str) -> str:
    """Generate error message for player not found."""
    return f"❌ Player not found: `{game_name}#{tag_line}`. Check the username and tag."


async def add_player(
    roster: RosterStore,
    riot_client: RiotApiClient,
    game_name: str,
    tag_line: str,
    fetch_timeout: float,
) -> Optional[Tuple[str, RankInfo]]:
    """
    Resolve a Riot ID, fetch its rank and store the player in the roster.

    A failed rank lookup stores the player as unranked; the next refresh
    cycle will retry it.

    Returns:
        (riot_id, rank) of the stored player, or None if the Riot ID does not exist

    Raises:
        RiotApiError: If the Riot ID could not be resolved because the API failed
        OSError: If the roster could not be saved
    """
    puuid = await riot_client.get_puuid(game_name, tag_line)
    if not puuid:
        return None

    try:
        rank = await asyncio.wait_for(riot_client.get_solo_rank(puuid, tag_line), timeout=fetch_timeout)
    except (RiotApiError, asyncio.TimeoutError) as e:
        logger.warning(f"Rank lookup for {game_name}#{tag_line} failed, storing as unranked: {e}")
        rank = RankInfo.unranked()

    record = await roster.upsert(puuid, game_name, tag_line, rank)
    await roster.save()
    logger.info(f"Tracked player {record.riot_id} ({puuid}) with rank {format_rank_summary(rank)}")
    return record.riot_id, rank


def setup_roster_commands(
    tree: app_commands.CommandTree,
    roster: RosterStore,
    riot_client: RiotApiClient,
    refresher: LeaderboardRefresher,
    channel_check=None,
) -> None:
    """
    Register the /add and /roster commands.

    Args:
        tree: The bot's command tree to register the commands with
        roster: Roster the commands read and modify
        riot_client: Client used to resolve Riot IDs and ranks
        refresher: Refresher notified when a player is added
        channel_check: Optional function to check if the channel is allowed
    """

    @tree.command(name="add", description="Add a player to the leaderboard")
    @app_commands.describe(
        username="The Riot ID game name of the player",
        tag="The Riot ID tag of the player (without #)"
    )
    @command_wrapper("add", channel_check)
    async def add_command(interaction: discord.Interaction, username: str, tag: str):
        """Add a player to the leaderboard and republish it."""
        command_start_time = time.time()

        game_name, tag_line = validate_riot_id(username, tag)
        added = await add_player(roster, riot_client, game_name, tag_line, refresher.fetch_timeout)

        if added is None:
            await interaction.followup.send(player_not_found_error(game_name, tag_line), ephemeral=True)
            log_command_completion("add", command_start_time, success=False, interaction=interaction, kwargs={"username": username, "tag": tag})
            return

        riot_id, rank = added
        await interaction.followup.send(
            f"✅ Added {riot_id} with rank {format_rank_summary(rank)}",
            ephemeral=True
        )
        log_command_completion("add", command_start_time, success=True, interaction=interaction, kwargs={"username": username, "tag": tag})

        try:
            await refresher.request_refresh(f"player added: {riot_id}")
        except Exception as e:
            logger.error(f"Leaderboard refresh after adding {riot_id} failed: {e}", exc_info=True)

    @tree.command(name="roster", description="List the players tracked on the leaderboard")
    @command_wrapper("roster", channel_check)
    async def roster_command(interaction: discord.Interaction):
        """List the tracked players in leaderboard order."""
        command_start_time = time.time()

        records = sort_leaderboard(await roster.snapshot())
        if not records:
            await interaction.followup.send("No players are tracked yet. Use `/add` to add one.", ephemeral=True)
            log_command_completion("roster", command_start_time, success=True, interaction=interaction)
            return

        table_data = [
            [position, record.riot_id, format_rank_summary(record.rank)]
            for position, record in enumerate(records, 1)
        ]
        message = build_table_message(
            title=f"## Tracked players ({len(records)})",
            table_data=table_data,
            headers=["#", "Player", "Rank"],
        )
        await interaction.followup.send(message, ephemeral=True)
        log_command_completion("roster", command_start_time, success=True, interaction=interaction)
