"""
Persistent state of the published leaderboard pages.

Tracks the ordered message ids of the managed leaderboard pages and the
channel they live in. Older deployments kept the ids in config.json, either
as a single "messageId" or as a "messageIds" list of snowflake strings. Those
keys are read when no state file exists yet and are replaced by
"message_ids" on the next save.
"""

import asyncio
import json
import logging

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

MESSAGE_ID_LIST_KEYS = ("message_ids", "messageIds")
LEGACY_MESSAGE_ID_KEYS = ("message_id", "messageId")


def extract_message_ids(data: Dict[str, Any]) -> List[int]:
    """
    Ordered message ids from a current or legacy state object.

    Raises:
        ValueError, TypeError: If an id is not a snowflake
    """
    for key in MESSAGE_ID_LIST_KEYS:
        if isinstance(data.get(key), list):
            return [int(message_id) for message_id in data[key]]

    for key in LEGACY_MESSAGE_ID_KEYS:
        legacy_id = data.get(key)
        if legacy_id:
            logger.info(f"Migrating legacy leaderboard message id {legacy_id} to multi-page state")
            return [int(legacy_id)]

    return []


class PublishStateStore:
    """Ordered list of published page message ids backed by a JSON file."""

    def __init__(
        self,
        path: Path,
        channel_id: Optional[int] = None,
        legacy_path: Optional[Path] = None,
    ) -> None:
        self.path = Path(path)
        self.channel_id = channel_id
        self.legacy_path = Path(legacy_path) if legacy_path else None
        self._lock = asyncio.Lock()
        self._message_ids: List[int] = []

    def _source_path(self) -> Optional[Path]:
        for candidate in (self.path, self.legacy_path):
            if candidate is not None and candidate.exists():
                return candidate
        return None

    async def load(self) -> None:
        """Load persisted message ids, migrating the legacy config.json layout."""
        source = self._source_path()
        if source is None:
            logger.info(f"Leaderboard state file not found at {self.path}, starting fresh")
            return

        try:
            with open(source, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, ValueError, IOError) as e:
            logger.warning(f"Failed to load leaderboard state from {source}: {e}. Starting fresh.")
            return

        if not isinstance(data, dict):
            logger.warning(f"Leaderboard state in {source} is not a JSON object. Starting fresh.")
            return

        try:
            message_ids = extract_message_ids(data)
            stored_channel_id = int(data["channel_id"]) if data.get("channel_id") else None
        except (TypeError, ValueError) as e:
            logger.warning(f"Invalid leaderboard state in {source}: {e}. Starting fresh.")
            return

        if self.channel_id and stored_channel_id and stored_channel_id != self.channel_id:
            logger.warning(
                f"Leaderboard state belongs to channel {stored_channel_id}, "
                f"not {self.channel_id}. Starting fresh."
            )
            return

        async with self._lock:
            self._message_ids = message_ids
        logger.info(f"Loaded leaderboard state from {source}: {len(message_ids)} page message id(s)")

    async def get_message_ids(self) -> List[int]:
        async with self._lock:
            return list(self._message_ids)

    async def save(self, message_ids: List[int]) -> None:
        """
        Replace the stored ids and persist them atomically.

        The in-memory ids are replaced before writing, so a failed write
        still leaves this store consistent with the live pages.

        Raises:
            OSError: If the file cannot be written
        """
        async with self._lock:
            self._message_ids = list(message_ids)

        data = {
            "message_ids": list(message_ids),
            "channel_id": self.channel_id,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_file = self.path.with_suffix('.json.tmp')
        with open(temp_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        temp_file.replace(self.path)
        logger.info(f"Saved leaderboard state: message_ids={message_ids}, channel_id={self.channel_id}")
