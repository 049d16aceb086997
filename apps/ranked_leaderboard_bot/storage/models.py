"""
Roster data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from libs.riot_api import RankInfo


@dataclass
class PlayerRecord:
    """
    A tracked player.

    Attributes:
        puuid: Stable Riot identity key, also the roster key
        username: Riot ID game name shown on the leaderboard
        tag: Riot ID tag line, used for platform routing
        rank: Last known solo queue standing
    """
    puuid: str
    username: str
    tag: str
    rank: RankInfo = field(default_factory=RankInfo.unranked)

    @property
    def riot_id(self) -> str:
        return f"{self.username}#{self.tag}"

    @classmethod
    def from_dict(cls, puuid: str, data: Dict[str, Any]) -> "PlayerRecord":
        return cls(
            puuid=puuid,
            username=data.get("username") or puuid,
            tag=data.get("tag") or "",
            rank=RankInfo.from_dict(data.get("rank")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "username": self.username,
            "rank": self.rank.to_dict(),
        }
