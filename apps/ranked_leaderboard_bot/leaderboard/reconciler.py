"""
Reconciliation of published leaderboard pages.

Given the ids of the previously published pages and a freshly rendered set
of pages, the reconciler:
- edits pages that still exist, in place
- recreates pages that were removed out-of-band
- creates pages beyond the previous count
- deletes pages beyond the new count

Each step is independent: a failing page never aborts the remaining ones.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class StalePageError(Exception):
    """The referenced page no longer exists on the publishing surface."""

    def __init__(self, message_id: int) -> None:
        super().__init__(f"Page message {message_id} no longer exists")
        self.message_id = message_id


class PagePublishError(Exception):
    """The publishing surface rejected an operation for a reason other than a missing page."""


@dataclass(frozen=True)
class LeaderboardPage:
    """One page of rendered leaderboard lines."""
    lines: Sequence[str]
    number: int
    total: int

    @property
    def body(self) -> str:
        return "\n".join(self.lines)


class PageSurface(Protocol):
    """Where pages get published. Implementations raise StalePageError / PagePublishError."""

    async def update_page(self, message_id: int, page: LeaderboardPage) -> int:
        ...

    async def create_page(self, page: LeaderboardPage) -> int:
        ...

    async def delete_page(self, message_id: int) -> None:
        ...


class PageOutcome(str, Enum):
    UPDATED = "updated"
    CREATED = "created"
    RECREATED = "recreated"
    DELETED = "deleted"
    DELETE_SKIPPED = "delete_skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class PageResult:
    """
    Outcome of one reconciliation step.

    Attributes:
        index: 0-based page index (for deletions, the index in the previous list)
        outcome: What happened to the page
        message_id: Id of the live page after the step, None if no page is live
        previous_id: Id the page had before the step, if any
    """
    index: int
    outcome: PageOutcome
    message_id: Optional[int] = None
    previous_id: Optional[int] = None


@dataclass
class ReconcileReport:
    results: List[PageResult] = field(default_factory=list)
    message_ids: List[int] = field(default_factory=list)

    def count(self, outcome: PageOutcome) -> int:
        return sum(1 for result in self.results if result.outcome == outcome)

    def summary(self) -> str:
        parts = [
            f"{outcome.value}={self.count(outcome)}"
            for outcome in PageOutcome
            if self.count(outcome)
        ]
        return ", ".join(parts) or "no changes"


class PageReconciler:
    """Synchronizes a published page set with newly rendered pages."""

    def __init__(self, surface: PageSurface) -> None:
        self.surface = surface

    async def reconcile(
        self,
        pages: Sequence[LeaderboardPage],
        previous_ids: Sequence[int],
    ) -> ReconcileReport:
        """
        Publish pages over the previously published ids.

        Args:
            pages: Newly rendered pages, in order
            previous_ids: Ids of the pages published by the previous cycle, in order

        Returns:
            ReconcileReport whose message_ids replaces previous_ids entirely
        """
        report = ReconcileReport()
        # Pages replaced after a failed edit that may still be live
        replaced_ids: List[int] = []

        for index, page in enumerate(pages):
            existing_id = previous_ids[index] if index < len(previous_ids) else None

            if existing_id is not None:
                result = await self._update_or_recreate(index, page, existing_id, replaced_ids)
            else:
                result = await self._create(index, page, PageOutcome.CREATED)

            report.results.append(result)
            if result.message_id is not None:
                report.message_ids.append(result.message_id)

        extras = list(enumerate(previous_ids))[len(pages):]
        extras.extend((-1, message_id) for message_id in replaced_ids)
        for index, message_id in extras:
            report.results.append(await self._delete(index, message_id))

        return report

    async def _update_or_recreate(
        self,
        index: int,
        page: LeaderboardPage,
        existing_id: int,
        replaced_ids: List[int],
    ) -> PageResult:
        try:
            message_id = await self.surface.update_page(existing_id, page)
            return PageResult(index, PageOutcome.UPDATED, message_id, existing_id)
        except StalePageError:
            logger.info(f"Page {index + 1} message {existing_id} was removed, recreating it")
        except PagePublishError as e:
            logger.warning(f"Could not edit page {index + 1} message {existing_id}: {e}, recreating it")
            result = await self._create(index, page, PageOutcome.RECREATED)
            if result.message_id is None:
                # The old message is still live, it keeps its slot until a later cycle
                return PageResult(index, PageOutcome.FAILED, existing_id, existing_id)
            replaced_ids.append(existing_id)
            return PageResult(index, result.outcome, result.message_id, existing_id)

        result = await self._create(index, page, PageOutcome.RECREATED)
        return PageResult(index, result.outcome, result.message_id, existing_id)

    async def _create(self, index: int, page: LeaderboardPage, outcome: PageOutcome) -> PageResult:
        try:
            message_id = await self.surface.create_page(page)
            return PageResult(index, outcome, message_id)
        except PagePublishError as e:
            logger.error(f"Failed to publish page {index + 1}/{page.total}: {e}", exc_info=True)
            return PageResult(index, PageOutcome.FAILED)

    async def _delete(self, index: int, message_id: int) -> PageResult:
        try:
            await self.surface.delete_page(message_id)
            return PageResult(index, PageOutcome.DELETED, previous_id=message_id)
        except StalePageError:
            logger.info(f"Extra page message {message_id} already gone")
        except PagePublishError as e:
            logger.warning(f"Could not delete extra page message {message_id}: {e}")
        return PageResult(index, PageOutcome.DELETE_SKIPPED, previous_id=message_id)
