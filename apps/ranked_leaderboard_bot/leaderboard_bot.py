"""
Discord bot entry point for the ranked leaderboard.

Loads the roster and published page state, registers the slash commands,
syncs them, and starts the scheduled leaderboard refresh once connected.
"""

import logging
import os
import signal

from typing import List

import discord

from discord import app_commands
from discord.ext import commands

from apps.ranked_leaderboard_bot.bot_config import get_bot_config
from apps.ranked_leaderboard_bot.commands import setup_roster_commands
from apps.ranked_leaderboard_bot.health_check import READINESS_FILE
from apps.ranked_leaderboard_bot.jobs import create_leaderboard_refresher, setup_leaderboard_refresh_task
from apps.ranked_leaderboard_bot.leaderboard import validate_rank_emoji_table
from apps.ranked_leaderboard_bot.storage import PublishStateStore, RosterStore
from libs.riot_api import RiotApiClient

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

bot_config = get_bot_config()


def mark_ready() -> None:
    try:
        open(READINESS_FILE, "a").close()
        logger.info("Bot is fully ready - healthcheck file created")
    except OSError as e:
        logger.warning(f"Could not create readiness file: {e}")


def mark_not_ready() -> None:
    """Remove readiness file so healthcheck fails while disconnected or stopped."""
    try:
        os.remove(READINESS_FILE)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Could not remove readiness file: {e}")


class LeaderboardBot(commands.Bot):
    """Slash-command-only bot owning the roster, the Riot client and the refresher."""

    def __init__(self) -> None:
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=discord.Intents.default(),
            description="Ranked Leaderboard Discord Bot",
        )
        self.riot_client = RiotApiClient()
        self.roster = RosterStore(bot_config.roster_file)
        self.publish_state = PublishStateStore(
            bot_config.leaderboard_state_file,
            bot_config.leaderboard_channel_id,
            legacy_path=bot_config.legacy_config_file,
        )
        self.refresher = create_leaderboard_refresher(
            self, bot_config, self.riot_client, self.roster, self.publish_state
        )
        setup_roster_commands(self.tree, self.roster, self.riot_client, self.refresher, self.is_allowed_channel)

    @staticmethod
    def is_allowed_channel(interaction: discord.Interaction) -> bool:
        """Returns True if the command is allowed in this channel."""
        if not bot_config.allowed_channel_ids:
            return True
        return interaction.channel_id in bot_config.allowed_channel_ids

    async def setup_hook(self) -> None:
        """Load persisted state before connecting to Discord."""
        logger.info(f"Running setup hook with {bot_config!r}")
        validate_rank_emoji_table()
        await self.roster.load()
        await self.publish_state.load()
        logger.info(f"Setup hook completed: {len(self.roster)} player(s) tracked")

    async def sync_commands(self) -> List[app_commands.AppCommand]:
        """Sync slash commands to the development guild if configured, globally otherwise."""
        if bot_config.dev_guild_id:
            guild = discord.Object(id=bot_config.dev_guild_id)
            # Replace stale guild registrations with the current global commands
            self.tree.clear_commands(guild=guild)
            self.tree.copy_global_to(guild=guild)
            logger.info(f"Syncing commands to development guild {bot_config.dev_guild_id}...")
            return await self.tree.sync(guild=guild)

        logger.info("Syncing commands globally...")
        return await self.tree.sync()

    async def on_ready(self) -> None:
        logger.info(f"{self.user} has connected to Discord, in {len(self.guilds)} guild(s)")

        try:
            synced = await self.sync_commands()
            logger.info(f"Synced {len(synced)} command(s): {', '.join(command.name for command in synced)}")
        except discord.HTTPException as e:
            logger.error(f"Failed to sync commands: {e}", exc_info=True)

        # on_ready fires again after reconnects, the task must only start once
        if not self.refresher.is_running():
            setup_leaderboard_refresh_task(self, self.refresher)

        mark_ready()

    async def on_disconnect(self) -> None:
        logger.info("Bot disconnected")
        mark_not_ready()

    async def close(self) -> None:
        """Stop the refresh task and release the Riot API session on shutdown."""
        self.refresher.stop()
        await self.riot_client.close()
        mark_not_ready()
        await super().close()


def main():
    """Main entry point for the Discord bot."""
    def handle_shutdown_signal(signum: int, frame) -> None:
        logger.info(f"Received signal {signum}, removing readiness file and exiting.")
        mark_not_ready()
        raise SystemExit(0)

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            signal.signal(sig, handle_shutdown_signal)
        except (ValueError, OSError):
            # Not available in every context (e.g. threads)
            pass

    bot = LeaderboardBot()
    try:
        logger.info("Starting Discord bot...")
        bot.run(bot_config.token, log_handler=None)
    except Exception as e:
        logger.error(f"Failed to start bot: {e}", exc_info=True)
        mark_not_ready()
        raise


if __name__ == "__main__":
    main()
