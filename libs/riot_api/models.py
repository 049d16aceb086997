"""
Data models returned by the Riot API client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

SOLO_QUEUE_TYPE = "RANKED_SOLO_5x5"


def _league_points(value: Any) -> Optional[int]:
    """League points as an int, None when missing or not a number."""
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


@dataclass
class RankInfo:
    """
    Ranked standing of a player in solo queue.

    Attributes:
        tier: Tier name as returned by Riot (e.g. "GOLD"), None if unranked/unknown
        division: Division within the tier ("I" to "IV"), None for apex tiers or unknown
        league_points: League points, None if unknown
    """
    tier: Optional[str] = None
    division: Optional[str] = None
    league_points: Optional[int] = None

    @classmethod
    def unranked(cls) -> "RankInfo":
        return cls()

    @property
    def is_ranked(self) -> bool:
        return self.tier is not None

    @classmethod
    def from_league_entry(cls, entry: Dict[str, Any]) -> "RankInfo":
        """Build from a league-v4 entry payload."""
        return cls(
            tier=entry.get("tier"),
            division=entry.get("rank"),
            league_points=entry.get("leaguePoints"),
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "RankInfo":
        """Build from the persisted {"tier", "division", "lp"} shape."""
        if not data:
            return cls.unranked()
        return cls(
            tier=data.get("tier"),
            division=data.get("division"),
            league_points=_league_points(data.get("lp")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier": self.tier,
            "division": self.division,
            "lp": self.league_points,
        }
