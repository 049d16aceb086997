"""
Async Riot API client for account and ranked lookups using aiohttp.
"""

from __future__ import annotations

import logging

from typing import Any, List, Optional, Tuple
from urllib.parse import quote

import aiohttp

from cachetools import LRUCache

from libs.riot_api.config import RiotApiConfig, get_riot_api_config
from libs.riot_api.models import SOLO_QUEUE_TYPE, RankInfo
from libs.riot_api.regions import platform_from_tag

logger = logging.getLogger(__name__)


class RiotApiError(Exception):
    """Raised when the Riot API fails for a reason other than a missing resource."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class RiotApiClient:
    """
    Thin client over the Riot account-v1 and league-v4 endpoints.

    Missing accounts and missing ranked entries are reported as None / unranked.
    Every other failure (rate limit, server error, network error) raises RiotApiError.
    """

    def __init__(
        self,
        config: Optional[RiotApiConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
        account_cache_size: int = 10000,
    ) -> None:
        self.config = config or get_riot_api_config()
        self._session = session
        self._owns_session = session is None
        # puuids are stable, so resolved Riot IDs never need invalidating
        self._account_cache: LRUCache[Tuple[str, str], str] = LRUCache(maxsize=account_cache_size)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                headers={"X-Riot-Token": self.config.api_key},
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()

    async def _get_json(self, url: str) -> Optional[Any]:
        """GET a JSON payload, returning None on 404."""
        session = await self._get_session()
        try:
            async with session.get(url) as response:
                if response.status == 404:
                    return None
                if response.status >= 400:
                    raise RiotApiError(
                        f"Riot API returned HTTP {response.status} for {url.split('?')[0]}",
                        status=response.status,
                    )
                return await response.json()
        except aiohttp.ClientError as e:
            raise RiotApiError(f"Riot API request failed: {e}") from e

    async def get_puuid(self, game_name: str, tag_line: str) -> Optional[str]:
        """
        Resolve a Riot ID (name#tag) to its puuid.

        Args:
            game_name: Riot ID game name
            tag_line: Riot ID tag line (without '#')

        Returns:
            The puuid, or None if no such account exists
        """
        cache_key = (game_name.strip().casefold(), tag_line.strip().casefold())
        cached = self._account_cache.get(cache_key)
        if cached:
            return cached

        url = self.config.account_url(quote(game_name.strip(), safe=""), quote(tag_line.strip(), safe=""))
        data = await self._get_json(url)
        puuid = data.get("puuid") if isinstance(data, dict) else None

        if puuid:
            self._account_cache[cache_key] = puuid
        else:
            logger.info(f"Riot ID not found: {game_name}#{tag_line}")
        return puuid

    async def get_solo_rank(self, puuid: str, tag_line: str) -> RankInfo:
        """Fetch the solo queue standing for a puuid, routed by the player's tag line."""
        platform = platform_from_tag(tag_line)
        data = await self._get_json(self.config.league_entries_url(platform, puuid))

        entries: List[dict] = data if isinstance(data, list) else []
        for entry in entries:
            if entry.get("queueType") == SOLO_QUEUE_TYPE:
                return RankInfo.from_league_entry(entry)
        return RankInfo.unranked()

    async def check_platform_status(self, platform: str) -> bool:
        """Return True if the platform status endpoint answers successfully."""
        try:
            return await self._get_json(self.config.platform_status_url(platform)) is not None
        except RiotApiError as e:
            logger.warning(f"Platform status check failed for {platform}: {e}")
            return False
