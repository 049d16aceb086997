"""
Rank classification and leaderboard ordering.
"""

from typing import Iterable, List, Optional, Tuple

from apps.ranked_leaderboard_bot.common.constants import (
    APEX_TIERS,
    DIVISIONS,
    RANK_INDEX,
    RANK_ORDER,
    UNRANKED_LABEL,
    Tier,
)
from apps.ranked_leaderboard_bot.storage.models import PlayerRecord

# Keys missing from RANK_ORDER sort after every known rank, Unranked included
UNKNOWN_RANK_INDEX = len(RANK_ORDER)


def classify_rank(tier: Optional[str], division: Optional[str]) -> str:
    """
    Convert a raw (tier, division) pair into its rank key.

    Apex tiers ignore the division. Anything that does not map onto the
    rank table (no tier, unknown tier, missing or invalid division) is
    classified as "Unranked".

    Returns:
        One of the entries of RANK_ORDER
    """
    parsed_tier = Tier.parse(tier)
    if parsed_tier is None:
        return UNRANKED_LABEL

    if parsed_tier in APEX_TIERS:
        return parsed_tier.value

    normalized_division = str(division or "").strip().upper()
    if normalized_division not in DIVISIONS:
        return UNRANKED_LABEL
    return f"{parsed_tier.value} {normalized_division}"


def rank_index(rank_key: str) -> int:
    """Position of a rank key in RANK_ORDER, lower is better."""
    return RANK_INDEX.get(rank_key, UNKNOWN_RANK_INDEX)


def leaderboard_sort_key(record: PlayerRecord) -> Tuple[int, int, str, str]:
    rank = record.rank
    return (
        rank_index(classify_rank(rank.tier, rank.division)),
        -(rank.league_points or 0),
        record.username.casefold(),
        record.puuid,
    )


def sort_leaderboard(records: Iterable[PlayerRecord]) -> List[PlayerRecord]:
    """Order players best rank first, then by league points descending."""
    return sorted(records, key=leaderboard_sort_key)
