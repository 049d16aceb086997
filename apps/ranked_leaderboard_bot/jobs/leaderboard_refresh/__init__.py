"""
Leaderboard refresh job package.

This package handles the scheduled refresh of player ranks and the
publishing of the paginated leaderboard into the leaderboard channel.
"""

from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh.job import (
    create_leaderboard_refresher,
    setup_leaderboard_refresh_task,
)
from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh.refresh_job import (
    LeaderboardRefresher,
    build_leaderboard_lines,
    build_pages,
)

__all__ = [
    'create_leaderboard_refresher',
    'setup_leaderboard_refresh_task',
    'LeaderboardRefresher',
    'build_leaderboard_lines',
    'build_pages',
]
