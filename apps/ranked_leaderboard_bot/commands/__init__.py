"""
Commands module for Discord bot.

Contains the roster commands (/add, /roster).
"""

from apps.ranked_leaderboard_bot.commands.roster import setup_roster_commands

__all__ = [
    'setup_roster_commands',
]
