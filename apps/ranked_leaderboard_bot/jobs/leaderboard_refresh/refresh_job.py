"""
Leaderboard refresh cycle and its scheduled task.

A cycle re-fetches the rank of every tracked player, rebuilds the
leaderboard pages and reconciles them with the pages already published.
Cycles are serialized: a refresh requested while one is running is folded
into a single trailing re-run.
"""

import asyncio
import logging

from discord.ext import tasks
from typing import Awaitable, Callable, List, Optional, Sequence

from apps.ranked_leaderboard_bot.common.constants import (
    DEFAULT_FETCH_CONCURRENCY,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_REFRESH_MINUTES,
    EMBED_DESCRIPTION_MAX_LENGTH,
    EMPTY_LEADERBOARD_LINE,
)
from apps.ranked_leaderboard_bot.leaderboard import (
    LeaderboardPage,
    PageReconciler,
    PageSurface,
    ReconcileReport,
    format_leaderboard_line,
    paginate_by_chars,
    resolve_rank_emoji,
    sort_leaderboard,
)
from apps.ranked_leaderboard_bot.storage import PlayerRecord, PublishStateStore, RosterStore
from libs.riot_api import RankInfo

logger = logging.getLogger(__name__)

RankFetcher = Callable[[str, str], Awaitable[RankInfo]]
SurfaceProvider = Callable[[], Awaitable[Optional[PageSurface]]]
EmojiResolver = Callable[[Optional[str]], str]


def build_leaderboard_lines(
    records: Sequence[PlayerRecord],
    emoji_resolver: Optional[EmojiResolver] = resolve_rank_emoji,
) -> List[str]:
    """Sort the roster and render one line per player."""
    lines = []
    for position, record in enumerate(sort_leaderboard(records), 1):
        rank = record.rank
        marker = emoji_resolver(rank.tier) if emoji_resolver else ""
        lines.append(format_leaderboard_line(
            record.username, rank.tier, rank.division, rank.league_points, position, marker
        ))
    return lines


def build_pages(lines: Sequence[str], max_chars: int = EMBED_DESCRIPTION_MAX_LENGTH) -> List[LeaderboardPage]:
    """Paginate lines, falling back to a single placeholder page for an empty roster."""
    chunks = paginate_by_chars(lines, max_chars) or [[EMPTY_LEADERBOARD_LINE]]
    return [
        LeaderboardPage(lines=tuple(chunk), number=number, total=len(chunks))
        for number, chunk in enumerate(chunks, 1)
    ]


class LeaderboardRefresher:
    """
    Owns the refresh cycle of the leaderboard.

    Holds the roster and publish state it works on, the rank fetcher used to
    refresh each player, and a provider for the surface pages are published on.
    """

    def __init__(
        self,
        roster: RosterStore,
        publish_state: PublishStateStore,
        rank_fetcher: RankFetcher,
        surface_provider: SurfaceProvider,
        fetch_timeout: float = DEFAULT_FETCH_TIMEOUT_SECONDS,
        max_concurrent_fetches: int = DEFAULT_FETCH_CONCURRENCY,
        refresh_minutes: float = DEFAULT_REFRESH_MINUTES,
        emoji_resolver: Optional[EmojiResolver] = resolve_rank_emoji,
    ) -> None:
        self.roster = roster
        self.publish_state = publish_state
        self.rank_fetcher = rank_fetcher
        self.surface_provider = surface_provider
        self.fetch_timeout = fetch_timeout
        self.max_concurrent_fetches = max_concurrent_fetches
        self.emoji_resolver = emoji_resolver

        self._cycle_lock = asyncio.Lock()
        self._rerun_requested = False
        self.last_report: Optional[ReconcileReport] = None

        self.refresh_loop = tasks.loop(minutes=refresh_minutes)(self._scheduled_refresh)

    # -------------------------------------------------------------------------
    # Triggering
    # -------------------------------------------------------------------------

    @property
    def is_refreshing(self) -> bool:
        return self._cycle_lock.locked()

    async def request_refresh(self, reason: str) -> bool:
        """
        Run a refresh cycle, or schedule a trailing re-run if one is in progress.

        Returns:
            True if this call ran the cycle(s), False if it was folded into the running one
        """
        if self._cycle_lock.locked():
            self._rerun_requested = True
            logger.info(f"Leaderboard refresh already running, queued a re-run ({reason})")
            return False

        async with self._cycle_lock:
            while True:
                self._rerun_requested = False
                await self._run_cycle(reason)
                if not self._rerun_requested:
                    break
                reason = "queued re-run"
        return True

    async def _scheduled_refresh(self) -> None:
        try:
            await self.request_refresh("scheduled")
        except Exception as e:
            logger.error(f"Error in scheduled leaderboard refresh: {e}", exc_info=True)

    def start(self) -> None:
        if not self.refresh_loop.is_running():
            self.refresh_loop.start()
            logger.info(f"Started leaderboard refresh task (every {self.refresh_loop.minutes:g} min)")
        else:
            logger.warning("Leaderboard refresh task already running")

    def stop(self) -> None:
        if self.refresh_loop.is_running():
            self.refresh_loop.stop()
            logger.info("Stopped leaderboard refresh task")

    def is_running(self) -> bool:
        return self.refresh_loop.is_running()

    # -------------------------------------------------------------------------
    # Cycle
    # -------------------------------------------------------------------------

    async def _fetch_rank(self, record: PlayerRecord, semaphore: asyncio.Semaphore) -> RankInfo:
        async with semaphore:
            try:
                return await asyncio.wait_for(
                    self.rank_fetcher(record.puuid, record.tag), timeout=self.fetch_timeout
                )
            except asyncio.TimeoutError:
                logger.warning(f"Rank fetch for {record.riot_id} timed out after {self.fetch_timeout}s")
            except Exception as e:
                logger.warning(f"Rank fetch for {record.riot_id} failed: {e}")
        return RankInfo.unranked()

    async def refresh_ranks(self) -> List[PlayerRecord]:
        """Re-fetch every player's rank concurrently and store the results in the roster."""
        records = await self.roster.snapshot()
        semaphore = asyncio.Semaphore(self.max_concurrent_fetches)
        ranks = await asyncio.gather(*(self._fetch_rank(record, semaphore) for record in records))

        for record, rank in zip(records, ranks):
            record.rank = rank
            await self.roster.set_rank(record.puuid, rank)
        return records

    async def publish(self, records: Sequence[PlayerRecord]) -> Optional[ReconcileReport]:
        """Render the leaderboard and reconcile it with the published pages."""
        pages = build_pages(build_leaderboard_lines(records, self.emoji_resolver))

        surface = await self.surface_provider()
        if surface is None:
            logger.warning("No leaderboard surface available, skipping publish")
            return None

        previous_ids = await self.publish_state.get_message_ids()
        report = await PageReconciler(surface).reconcile(pages, previous_ids)
        logger.info(f"Published {len(pages)} leaderboard page(s): {report.summary()}")

        try:
            await self.publish_state.save(report.message_ids)
        except OSError as e:
            logger.error(f"Failed to save leaderboard state: {e}", exc_info=True)
        return report

    async def _run_cycle(self, reason: str) -> None:
        logger.info(f"Starting leaderboard refresh ({reason}) for {len(self.roster)} player(s)")

        records = await self.refresh_ranks()
        self.last_report = await self.publish(records)

        try:
            await self.roster.save()
        except OSError as e:
            logger.error(f"Failed to save roster: {e}", exc_info=True)

        logger.info("Leaderboard refresh complete")
