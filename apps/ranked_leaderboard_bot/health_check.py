"""
Container health check for the leaderboard bot.

Healthy means both:
- the bot is connected to Discord (the bot keeps READINESS_FILE while connected)
- the Riot API answers with the configured key (platform status endpoint)

Exits 0 when healthy, 1 otherwise.
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys

from libs.riot_api import DEFAULT_PLATFORM, RiotApiClient

logger = logging.getLogger(__name__)

READINESS_FILE = "/tmp/leaderboard-bot-ready"


async def check_riot_api(platform: str = DEFAULT_PLATFORM) -> bool:
    try:
        client = RiotApiClient()
    except ValueError as e:
        logger.warning(f"Riot API not configured: {e}")
        return False

    try:
        return await client.check_platform_status(platform)
    finally:
        await client.close()


async def is_healthy() -> bool:
    if not os.path.isfile(READINESS_FILE):
        logger.warning(f"Readiness file {READINESS_FILE} missing, bot not connected")
        return False
    return await check_riot_api()


def main() -> int:
    return 0 if asyncio.run(is_healthy()) else 1


if __name__ == "__main__":
    sys.exit(main())
