"""
Common utilities module for Discord bot.

This module provides centralized access to shared functionality:
- Command logging
- Command decorators and error replies
- Input validation
- Table message building
- Constants and lookup tables
"""

# Command logging
from apps.ranked_leaderboard_bot.common.logging import (
    log_command_data,
    log_command_completion,
    get_command_latency_ms,
)

# Command decorators
from apps.ranked_leaderboard_bot.common.decorators import (
    command_wrapper,
    handle_command_errors,
    CHANNEL_NOT_ALLOWED_MESSAGE,
)

# Input validation
from apps.ranked_leaderboard_bot.common.validation import (
    validate_riot_id,
)

# Table messages
from apps.ranked_leaderboard_bot.common.message_builder import (
    build_table_message,
)

# Constants
from apps.ranked_leaderboard_bot.common.constants import (
    DISCORD_MESSAGE_MAX_LENGTH,
    EMBED_DESCRIPTION_MAX_LENGTH,
    EMPTY_LEADERBOARD_LINE,
    LEADERBOARD_COLOR,
    RANK_ORDER,
    Tier,
)

__all__ = [
    # Logging
    'log_command_data',
    'log_command_completion',
    'get_command_latency_ms',
    # Decorators
    'command_wrapper',
    'handle_command_errors',
    'CHANNEL_NOT_ALLOWED_MESSAGE',
    # Validation
    'validate_riot_id',
    # Messages
    'build_table_message',
    # Constants
    'DISCORD_MESSAGE_MAX_LENGTH',
    'EMBED_DESCRIPTION_MAX_LENGTH',
    'EMPTY_LEADERBOARD_LINE',
    'LEADERBOARD_COLOR',
    'RANK_ORDER',
    'Tier',
]
