"""
Roster of tracked players with JSON persistence.

The file maps each puuid to {"tag", "username", "rank"} and is rewritten
as a whole on every mutation.
"""

import asyncio
import json
import logging

from pathlib import Path
from typing import Dict, List, Optional

from apps.ranked_leaderboard_bot.storage.models import PlayerRecord
from libs.riot_api import RankInfo

logger = logging.getLogger(__name__)


class RosterStore:
    """In-memory roster backed by a JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()
        self._players: Dict[str, PlayerRecord] = {}

    async def load(self) -> None:
        """Load the persisted roster from disk, starting empty if missing or unreadable."""
        if not self.path.exists():
            logger.info(f"Roster file not found at {self.path}, starting with an empty roster")
            return

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            async with self._lock:
                self._players = {
                    puuid: PlayerRecord.from_dict(puuid, entry)
                    for puuid, entry in data.items()
                }
            logger.info(f"Loaded {len(self._players)} players from {self.path}")
        except (json.JSONDecodeError, ValueError, AttributeError, IOError) as e:
            logger.warning(f"Failed to load roster from {self.path}: {e}. Starting with an empty roster.")

    async def save(self) -> None:
        """
        Persist the whole roster atomically.

        Raises:
            OSError: If the file cannot be written
        """
        async with self._lock:
            data = {puuid: record.to_dict() for puuid, record in self._players.items()}

        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix('.json.tmp')
        with open(temp_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        temp_file.replace(self.path)
        logger.info(f"Saved {len(data)} players to {self.path}")

    async def upsert(self, puuid: str, username: str, tag: str, rank: RankInfo) -> PlayerRecord:
        """Add a player, or update name, tag and rank of an existing one."""
        async with self._lock:
            record = self._players.get(puuid)
            if record is None:
                record = PlayerRecord(puuid=puuid, username=username, tag=tag, rank=rank)
                self._players[puuid] = record
            else:
                record.username = username
                record.tag = tag
                record.rank = rank
            return record

    async def set_rank(self, puuid: str, rank: RankInfo) -> None:
        async with self._lock:
            record = self._players.get(puuid)
            if record is not None:
                record.rank = rank

    async def snapshot(self) -> List[PlayerRecord]:
        """Copy of the current records, safe to iterate while the roster changes."""
        async with self._lock:
            return [
                PlayerRecord(record.puuid, record.username, record.tag, record.rank)
                for record in self._players.values()
            ]

    async def get(self, puuid: str) -> Optional[PlayerRecord]:
        async with self._lock:
            return self._players.get(puuid)

    def __len__(self) -> int:
        return len(self._players)
