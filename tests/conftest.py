"""Shared test fixtures.

The publishing surface is replaced by an in-memory fake that records every
operation, and stores write to pytest's tmp_path.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

import pytest

from apps.ranked_leaderboard_bot.leaderboard import (
    LeaderboardPage,
    PagePublishError,
    StalePageError,
)
from apps.ranked_leaderboard_bot.storage import PlayerRecord, PublishStateStore, RosterStore
from libs.riot_api import RankInfo


class FakePageSurface:
    """In-memory PageSurface; message ids start at 1000."""

    def __init__(self, existing_ids=(), next_id: int = 1000) -> None:
        self.messages: Dict[int, Optional[LeaderboardPage]] = {mid: None for mid in existing_ids}
        self.calls: List[Tuple[str, int]] = []
        self.failing_updates: Set[int] = set()
        self.failing_deletes: Set[int] = set()
        self.fail_create_numbers: Set[int] = set()
        self._next_id = next_id

    async def update_page(self, message_id: int, page: LeaderboardPage) -> int:
        if message_id not in self.messages:
            raise StalePageError(message_id)
        if message_id in self.failing_updates:
            raise PagePublishError(f"cannot edit {message_id}")
        self.messages[message_id] = page
        self.calls.append(("update", message_id))
        return message_id

    async def create_page(self, page: LeaderboardPage) -> int:
        if page.number in self.fail_create_numbers:
            raise PagePublishError(f"cannot send page {page.number}")
        message_id = self._next_id
        self._next_id += 1
        self.messages[message_id] = page
        self.calls.append(("create", message_id))
        return message_id

    async def delete_page(self, message_id: int) -> None:
        if message_id not in self.messages:
            raise StalePageError(message_id)
        if message_id in self.failing_deletes:
            raise PagePublishError(f"cannot delete {message_id}")
        del self.messages[message_id]
        self.calls.append(("delete", message_id))

    def operations(self) -> List[str]:
        return [operation for operation, _ in self.calls]


def make_record(
    puuid: str,
    username: Optional[str] = None,
    tier: Optional[str] = None,
    division: Optional[str] = None,
    lp: Optional[int] = None,
    tag: str = "EUW",
) -> PlayerRecord:
    return PlayerRecord(
        puuid=puuid,
        username=username or puuid,
        tag=tag,
        rank=RankInfo(tier=tier, division=division, league_points=lp),
    )


def make_pages(count: int, lines_per_page: int = 1) -> List[LeaderboardPage]:
    return [
        LeaderboardPage(
            lines=tuple(f"{n}.{i} line" for i in range(lines_per_page)),
            number=n,
            total=count,
        )
        for n in range(1, count + 1)
    ]


@pytest.fixture
def surface() -> FakePageSurface:
    return FakePageSurface()


@pytest.fixture
def roster(tmp_path) -> RosterStore:
    return RosterStore(tmp_path / "players.json")


@pytest.fixture
def publish_state(tmp_path) -> PublishStateStore:
    return PublishStateStore(tmp_path / "leaderboard_state.json", channel_id=42)
