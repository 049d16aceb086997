"""
Discord bot configuration from environment variables.
"""

from __future__ import annotations

import logging
import os

from pathlib import Path
from typing import Optional, Set

from dotenv import load_dotenv

from apps.ranked_leaderboard_bot.common.constants import (
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_REFRESH_MINUTES,
)

logger = logging.getLogger(__name__)

APPS_DIR = Path(__file__).parent.parent
ROOT_DIR = APPS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"
DOCKER_ENV_FILE = ROOT_DIR / "infra" / "docker" / ".env"

env_loaded = False
for env_path in [DOCKER_ENV_FILE, ENV_FILE]:
    if env_path.exists():
        try:
            load_dotenv(dotenv_path=env_path, override=False)
            logger.info(f"Loaded .env from {env_path}")
            env_loaded = True
            break
        except Exception as e:
            logger.error(f"Failed to load {env_path}: {e}", exc_info=True)
if not env_loaded:
    logger.info("No .env file found")


def _parse_id_set(raw: str) -> Set[int]:
    return {int(item.strip()) for item in raw.split(",") if item.strip()}


def _optional_int(name: str, fallback_name: Optional[str] = None) -> Optional[int]:
    raw = os.getenv(name)
    if not raw and fallback_name:
        raw = os.getenv(fallback_name)
    return int(raw) if raw else None


class DiscordBotConfig:
    """Discord bot settings loaded from environment variables."""

    def __init__(self) -> None:
        self.token: Optional[str] = os.getenv("DISCORD_BOT_TOKEN")

        if not self.token:
            raise ValueError("DISCORD_BOT_TOKEN environment variable is required")

        self.allowed_channel_ids: Set[int] = _parse_id_set(os.getenv("DISCORD_ALLOWED_CHANNEL_IDS", ""))
        self.dev_guild_id: Optional[int] = _optional_int("DISCORD_DEV_GUILD_ID")

        # DEFAULT_CHANNEL_ID is the name used by older deployments
        self.leaderboard_channel_id: Optional[int] = _optional_int(
            "DISCORD_LEADERBOARD_CHANNEL_ID", fallback_name="DEFAULT_CHANNEL_ID"
        )

        self.data_dir: Path = Path(os.getenv("LEADERBOARD_DATA_DIR", "/app/data"))
        self.refresh_minutes: float = float(os.getenv("LEADERBOARD_REFRESH_MINUTES", str(DEFAULT_REFRESH_MINUTES)))
        self.fetch_timeout_seconds: float = float(
            os.getenv("RIOT_FETCH_TIMEOUT_SECONDS", str(DEFAULT_FETCH_TIMEOUT_SECONDS))
        )
        self.fetch_concurrency: int = int(os.getenv("RIOT_FETCH_CONCURRENCY", str(DEFAULT_FETCH_CONCURRENCY)))

        if self.refresh_minutes <= 0:
            raise ValueError(f"LEADERBOARD_REFRESH_MINUTES must be positive, got {self.refresh_minutes}")
        if self.fetch_concurrency < 1:
            raise ValueError(f"RIOT_FETCH_CONCURRENCY must be at least 1, got {self.fetch_concurrency}")

    @property
    def roster_file(self) -> Path:
        return self.data_dir / "players.json"

    @property
    def leaderboard_state_file(self) -> Path:
        return self.data_dir / "leaderboard_state.json"

    @property
    def legacy_config_file(self) -> Path:
        return self.data_dir / "config.json"

    def __repr__(self) -> str:
        return (
            f"DiscordBotConfig("
            f"token=***, "
            f"allowed_channel_ids={self.allowed_channel_ids}, "
            f"dev_guild_id={self.dev_guild_id}, "
            f"leaderboard_channel_id={self.leaderboard_channel_id}, "
            f"data_dir={str(self.data_dir)!r}, "
            f"refresh_minutes={self.refresh_minutes}, "
            f"fetch_timeout_seconds={self.fetch_timeout_seconds}, "
            f"fetch_concurrency={self.fetch_concurrency})"
        )


_bot_config: Optional[DiscordBotConfig] = None


def get_bot_config() -> DiscordBotConfig:
    """Get or create the singleton config instance."""
    global _bot_config
    if _bot_config is None:
        _bot_config = DiscordBotConfig()
    return _bot_config
