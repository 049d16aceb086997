"""
Shared Riot Games API access for the ranked leaderboard project.

This package provides the account and ranked lookups used by the
Discord bot and its health check.
"""

from libs.riot_api.config import get_riot_api_config, RiotApiConfig
from libs.riot_api.client import RiotApiClient, RiotApiError
from libs.riot_api.models import RankInfo, SOLO_QUEUE_TYPE
from libs.riot_api.regions import platform_from_tag, DEFAULT_PLATFORM

__all__ = [
    'get_riot_api_config',
    'RiotApiConfig',
    'RiotApiClient',
    'RiotApiError',
    'RankInfo',
    'SOLO_QUEUE_TYPE',
    'platform_from_tag',
    'DEFAULT_PLATFORM',
]
