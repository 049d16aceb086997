"""
Plain-text table messages for command replies.
"""

from typing import Any, List, Sequence

from tabulate import tabulate

from apps.ranked_leaderboard_bot.common.constants import DISCORD_MESSAGE_MAX_LENGTH


def _render_table(title: str, rows: Sequence[Sequence[Any]], headers: List[str], total: int) -> str:
    parts = [title, "```", tabulate(rows, headers=headers, tablefmt="github"), "```"]
    if len(rows) < total:
        parts.append(f"*Showing {len(rows)} of {total} players*")
    return "\n".join(parts)


def build_table_message(
    title: str,
    table_data: Sequence[Sequence[Any]],
    headers: List[str],
    max_length: int = DISCORD_MESSAGE_MAX_LENGTH,
) -> str:
    """
    Render rows as a github-style table inside a code block.

    Trailing rows are dropped until the message fits max_length, with a
    note saying how many rows are shown.
    """
    for row_count in range(len(table_data), 0, -1):
        message = _render_table(title, table_data[:row_count], headers, len(table_data))
        if len(message) <= max_length:
            return message
    return f"{title}\n*Too many players to display*"
