"""
Slash command decorators: channel gating, deferral, logging and error replies.
"""

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Optional, Tuple, Type

import aiohttp
import discord

from apps.ranked_leaderboard_bot.common.logging import (
    log_command_data,
    log_command_completion,
)
from libs.riot_api import RiotApiError

logger = logging.getLogger(__name__)

CHANNEL_NOT_ALLOWED_MESSAGE = "❌ This bot can only be used in the designated channel."
UNEXPECTED_ERROR_MESSAGE = "❌ An unexpected error occurred."

# First matching entry wins; ValueError replies carry the error text itself
ERROR_REPLIES: Tuple[Tuple[Tuple[Type[BaseException], ...], str, Optional[str]], ...] = (
    ((ValueError,), "Invalid input", None),
    ((RiotApiError, aiohttp.ClientError), "Riot API error", "❌ The Riot API is unavailable right now. Please try again later."),
    ((OSError,), "Storage error", "❌ Could not save the roster. Please contact the bot administrator."),
)


def _error_reply(error: Exception) -> Tuple[str, str]:
    """(log label, user-facing message) for an error raised by a command."""
    for error_types, label, message in ERROR_REPLIES:
        if isinstance(error, error_types):
            return label, message or f"❌ {error}"
    return "Unexpected error", UNEXPECTED_ERROR_MESSAGE


async def handle_command_errors(
    interaction: discord.Interaction,
    command_name: str,
    start_time: float,
    error: Exception,
    use_ephemeral: bool = True,
    kwargs: Optional[dict] = None
) -> None:
    """Log a failed command and tell the user what went wrong."""
    label, error_msg = _error_reply(error)
    logger.error(f"{label} in /{command_name}: {error}", exc_info=(type(error), error, error.__traceback__))
    log_command_completion(command_name, start_time, success=False, interaction=interaction, kwargs=kwargs)

    if interaction.response.is_done():
        await interaction.followup.send(error_msg, ephemeral=use_ephemeral)
    else:
        await interaction.response.send_message(error_msg, ephemeral=use_ephemeral)


def command_wrapper(
    command_name: str,
    channel_check: Optional[Callable[[discord.Interaction], bool]] = None,
    log_params: Optional[dict] = None,
    ephemeral: bool = True
):
    """
    Wrap a slash command callback.

    The wrapper logs the invocation, rejects disallowed channels, defers the
    response (so the command replies through interaction.followup) and turns
    any exception into a logged error plus a reply. Commands log their own
    successful completion.

    Args:
        command_name: Name of the command for logging
        channel_check: Optional predicate deciding whether the channel is allowed
        log_params: Optional extra params to log with every invocation
        ephemeral: Whether the deferred response and error replies are private
    """
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        async def wrapper(interaction: discord.Interaction, *args, **kwargs):
            start_time = time.time()
            params = {**(log_params or {}), **kwargs}
            log_command_data(interaction, command_name, **params)

            if channel_check and not channel_check(interaction):
                await interaction.response.send_message(CHANNEL_NOT_ALLOWED_MESSAGE, ephemeral=True)
                log_command_completion(command_name, start_time, success=False, interaction=interaction, kwargs=params)
                return None

            try:
                await interaction.response.defer(ephemeral=ephemeral)
                return await func(interaction, *args, **kwargs)
            except Exception as e:
                await handle_command_errors(
                    interaction, command_name, start_time, e, use_ephemeral=ephemeral, kwargs=params
                )
                return None

        # discord.py reads the command parameters from the signature
        wrapper.__signature__ = inspect.signature(func)
        return wrapper
    return decorator
