"""
Jobs module for Discord bot.

Contains scheduled tasks that automatically post the leaderboard
to its Discord channel at regular intervals.
"""

from apps.ranked_leaderboard_bot.jobs.leaderboard_refresh import (
    create_leaderboard_refresher,
    setup_leaderboard_refresh_task,
    LeaderboardRefresher,
)

__all__ = [
    'create_leaderboard_refresher',
    'setup_leaderboard_refresh_task',
    'LeaderboardRefresher',
]
