"""
Constants and lookup tables used across the leaderboard bot.
"""

from enum import Enum
from typing import Dict, List, Optional

import discord

# =============================================================================
# Visual Branding
# =============================================================================

LEADERBOARD_COLOR = discord.Color(0x2B2D31)
LEADERBOARD_TITLE = "🏆 Leaderboard"
LEADERBOARD_FOOTER = "Ranked Leaderboard"
EMPTY_LEADERBOARD_LINE = "_No players on the leaderboard yet_"

# =============================================================================
# Discord Limits
# =============================================================================

DISCORD_MESSAGE_MAX_LENGTH = 2000
EMBED_DESCRIPTION_MAX_LENGTH = 4096

# =============================================================================
# Refresh Defaults
# =============================================================================

DEFAULT_REFRESH_MINUTES = 15
DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0
DEFAULT_FETCH_CONCURRENCY = 5

# =============================================================================
# Ranked Tiers
# =============================================================================


class Tier(str, Enum):
    """Ranked tiers, best first."""
    CHALLENGER = "CHALLENGER"
    GRANDMASTER = "GRANDMASTER"
    MASTER = "MASTER"
    DIAMOND = "DIAMOND"
    EMERALD = "EMERALD"
    PLATINUM = "PLATINUM"
    GOLD = "GOLD"
    SILVER = "SILVER"
    BRONZE = "BRONZE"
    IRON = "IRON"

    @classmethod
    def parse(cls, raw: Optional[str]) -> Optional["Tier"]:
        """Return the Tier for a raw tier string, or None if absent or unknown."""
        if not raw:
            return None
        try:
            return cls(str(raw).strip().upper())
        except ValueError:
            return None


# Apex tiers have a single ladder and no division
APEX_TIERS = frozenset({Tier.CHALLENGER, Tier.GRANDMASTER, Tier.MASTER})
DIVISIONS = ("I", "II", "III", "IV")
UNRANKED_LABEL = "Unranked"


def _build_rank_order() -> List[str]:
    order: List[str] = []
    for tier in Tier:
        if tier in APEX_TIERS:
            order.append(tier.value)
        else:
            order.extend(f"{tier.value} {division}" for division in DIVISIONS)
    order.append(UNRANKED_LABEL)
    return order


# CHALLENGER, GRANDMASTER, MASTER, DIAMOND I ... IRON IV, Unranked
RANK_ORDER: List[str] = _build_rank_order()
RANK_INDEX: Dict[str, int] = {rank_key: index for index, rank_key in enumerate(RANK_ORDER)}

# =============================================================================
# Tier Emojis
# =============================================================================

UNRANKED_EMOJI_KEY = "UNRANKED"

RANK_EMOJI_MARKUP: Dict[str, str] = {
    Tier.IRON.value: "<:iron:1355271339526717661>",
    Tier.BRONZE.value: "<:bronze:1355271334674042960>",
    Tier.SILVER.value: "<:silver:1355271338163441664>",
    Tier.GOLD.value: "<:gold:1355271332727619825>",
    Tier.PLATINUM.value: "<:platinum:1355271336737374329>",
    Tier.EMERALD.value: "<:emerald:1355272015199731942>",
    Tier.DIAMOND.value: "<:diamond:1355271331301818389>",
    Tier.MASTER.value: "<:master:1355271340835340410>",
    Tier.GRANDMASTER.value: "<:grandmaster:1355271343997714583>",
    Tier.CHALLENGER.value: "<:challenger:1355271342311866539>",
    UNRANKED_EMOJI_KEY: "<:unranked:1355984490534535229>",
}
