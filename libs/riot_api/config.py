"""
Riot API configuration from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


LIBS_DIR = Path(__file__).parent.parent
ROOT_DIR = LIBS_DIR.parent
ENV_FILE = ROOT_DIR / ".env"

if ENV_FILE.exists():
    load_dotenv(dotenv_path=ENV_FILE, override=False)


class RiotApiConfig:
    """Riot API key and routing settings from environment variables."""

    def __init__(self) -> None:
        api_key = os.getenv("RIOT_API_KEY")
        if not api_key:
            raise ValueError("RIOT_API_KEY environment variable is required")
        self.api_key: str = api_key

        # Regional cluster serving the account-v1 endpoints (americas/asia/europe)
        self.account_region: str = os.getenv("RIOT_ACCOUNT_REGION", "europe")
        self.request_timeout: float = float(os.getenv("RIOT_REQUEST_TIMEOUT_SECONDS", "10"))

    def account_url(self, game_name: str, tag_line: str) -> str:
        return (
            f"https://{self.account_region}.api.riotgames.com"
            f"/riot/account/v1/accounts/by-riot-id/{game_name}/{tag_line}"
        )

    @staticmethod
    def league_entries_url(platform: str, puuid: str) -> str:
        return f"https://{platform}.api.riotgames.com/lol/league/v4/entries/by-puuid/{puuid}"

    @staticmethod
    def platform_status_url(platform: str) -> str:
        return f"https://{platform}.api.riotgames.com/lol/status/v4/platform-data"

    def __repr__(self) -> str:
        return (
            f"RiotApiConfig(api_key=***, "
            f"account_region={self.account_region!r}, "
            f"request_timeout={self.request_timeout})"
        )


_riot_api_config: Optional[RiotApiConfig] = None


def get_riot_api_config() -> RiotApiConfig:
    """Get or create the singleton config instance."""
    global _riot_api_config
    if _riot_api_config is None:
        _riot_api_config = RiotApiConfig()
    return _riot_api_config
