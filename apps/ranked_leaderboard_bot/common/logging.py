"""
Logging of slash command invocations and their outcome.
"""

import logging
import time
from typing import Any, Dict, Optional

import discord

logger = logging.getLogger(__name__)


def describe_invoker(interaction: discord.Interaction) -> str:
    """"name (id) in #channel (id)" for the user who ran a command."""
    user = interaction.user
    channel_name = getattr(interaction.channel, "name", None) or "DM"
    return f"{user.name} ({user.id}) in #{channel_name} ({interaction.channel_id})"


def _format_params(params: Optional[Dict[str, Any]]) -> str:
    shown = {key: value for key, value in (params or {}).items() if value is not None}
    if not shown:
        return ""
    return " | " + ", ".join(f"{key}={value}" for key, value in shown.items())


def log_command_data(interaction: discord.Interaction, command_name: str, **params) -> None:
    logger.info(f"/{command_name} invoked by {describe_invoker(interaction)}{_format_params(params)}")


def get_command_latency_ms(start_time: float) -> float:
    return (time.time() - start_time) * 1000


def log_command_completion(
    command_name: str,
    start_time: float,
    success: bool = True,
    interaction: Optional[discord.Interaction] = None,
    kwargs: Optional[Dict[str, Any]] = None,
) -> None:
    """Log whether a command succeeded and how long it took."""
    outcome = "succeeded" if success else "failed"
    invoker = f" for {describe_invoker(interaction)}" if interaction is not None else ""
    logger.info(
        f"/{command_name} {outcome} in {get_command_latency_ms(start_time):.0f}ms{invoker}{_format_params(kwargs)}"
    )
