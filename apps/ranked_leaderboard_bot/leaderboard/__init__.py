"""
Leaderboard engine: rank ordering, line formatting, pagination and
reconciliation of published pages.
"""

from apps.ranked_leaderboard_bot.leaderboard.ranking import (
    classify_rank,
    rank_index,
    sort_leaderboard,
    UNKNOWN_RANK_INDEX,
)
from apps.ranked_leaderboard_bot.leaderboard.formatting import (
    format_leaderboard_line,
    format_rank_summary,
    resolve_rank_emoji,
    validate_rank_emoji_table,
)
from apps.ranked_leaderboard_bot.leaderboard.pagination import (
    paginate_by_chars,
    clamp_page_body,
)
from apps.ranked_leaderboard_bot.leaderboard.reconciler import (
    LeaderboardPage,
    PageOutcome,
    PagePublishError,
    PageReconciler,
    PageResult,
    PageSurface,
    ReconcileReport,
    StalePageError,
)

__all__ = [
    'classify_rank',
    'rank_index',
    'sort_leaderboard',
    'UNKNOWN_RANK_INDEX',
    'format_leaderboard_line',
    'format_rank_summary',
    'resolve_rank_emoji',
    'validate_rank_emoji_table',
    'paginate_by_chars',
    'clamp_page_body',
    'LeaderboardPage',
    'PageOutcome',
    'PagePublishError',
    'PageReconciler',
    'PageResult',
    'PageSurface',
    'ReconcileReport',
    'StalePageError',
]
