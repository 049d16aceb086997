"""
JSON-file persistence for the roster and the published page state.
"""

from apps.ranked_leaderboard_bot.storage.models import PlayerRecord
from apps.ranked_leaderboard_bot.storage.roster_store import RosterStore
from apps.ranked_leaderboard_bot.storage.publish_state import PublishStateStore

__all__ = [
    'PlayerRecord',
    'RosterStore',
    'PublishStateStore',
]
