"""
Display formatting for leaderboard lines and rank summaries.
"""

from typing import List, Optional

from apps.ranked_leaderboard_bot.common.constants import (
    APEX_TIERS,
    RANK_EMOJI_MARKUP,
    UNRANKED_EMOJI_KEY,
    UNRANKED_LABEL,
    Tier,
)
from libs.riot_api import RankInfo


def _rank_text(tier: Optional[str], division: Optional[str], league_points: Optional[int]) -> str:
    tier_text = tier or UNRANKED_LABEL

    division_text = ""
    if Tier.parse(tier) not in APEX_TIERS and division:
        division_text = f" {division}"

    lp_text = f" - {league_points} LP" if league_points else ""
    return f"{tier_text}{division_text}{lp_text}"


def format_rank_summary(rank: RankInfo) -> str:
    """Render a rank as e.g. "GOLD II - 40 LP", "CHALLENGER - 900 LP" or "Unranked"."""
    return _rank_text(rank.tier, rank.division, rank.league_points)


def format_leaderboard_line(
    username: str,
    tier: Optional[str],
    division: Optional[str],
    league_points: Optional[int],
    position: int,
    marker: str = "",
) -> str:
    """
    Render one leaderboard entry.

    Args:
        username: Player display name
        tier: Raw tier, None when unranked
        division: Raw division, ignored for apex tiers
        league_points: League points, omitted when None or 0
        position: 1-based leaderboard position
        marker: Optional decoration shown before the name (tier emoji)

    Returns:
        "{position}. {marker }{name} : {rank text}"
    """
    marker_text = f"{marker} " if marker else ""
    return f"{position}. {marker_text}{username} : {_rank_text(tier, division, league_points)}"


def resolve_rank_emoji(tier: Optional[str]) -> str:
    """Emoji markup for a tier, the unranked emoji when the tier is absent or unknown."""
    parsed = Tier.parse(tier)
    if parsed is None:
        return RANK_EMOJI_MARKUP[UNRANKED_EMOJI_KEY]
    return RANK_EMOJI_MARKUP[parsed.value]


def validate_rank_emoji_table() -> None:
    """Raise ValueError if any tier (or the unranked fallback) has no emoji."""
    expected = [tier.value for tier in Tier] + [UNRANKED_EMOJI_KEY]
    missing: List[str] = [key for key in expected if not RANK_EMOJI_MARKUP.get(key)]
    if missing:
        raise ValueError(f"Missing rank emoji markup for: {', '.join(missing)}")
