"""
Ranked Leaderboard Discord Bot package.

This package provides a Discord bot that tracks a roster of League of
Legends players and keeps a paginated ranked leaderboard up to date in a
Discord channel.
"""

def main():
    """Main entry point for the Discord bot."""
    from apps.ranked_leaderboard_bot.leaderboard_bot import main as _main
    _main()

__all__ = ['main']
