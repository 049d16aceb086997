"""
Character-budget pagination of leaderboard lines.

Embed descriptions are limited to 4096 characters, so the leaderboard is
split across as many messages as needed.
"""

from typing import List, Sequence

from apps.ranked_leaderboard_bot.common.constants import EMBED_DESCRIPTION_MAX_LENGTH


def paginate_by_chars(lines: Sequence[str], max_chars: int = EMBED_DESCRIPTION_MAX_LENGTH) -> List[List[str]]:
    """
    Greedily pack lines into pages whose newline-joined length stays within max_chars.

    A single line longer than max_chars gets a page of its own, truncated
    to max_chars - 1 characters. An empty input yields no pages.
    """
    pages: List[List[str]] = []
    current: List[str] = []
    current_len = 0

    for line in lines:
        # +1 for the newline separator, except on the first line of a page
        add_len = len(line) + (1 if current else 0)

        if len(line) > max_chars:
            if current:
                pages.append(current)
            pages.append([line[:max_chars - 1]])
            current = []
            current_len = 0
            continue

        if current_len + add_len > max_chars:
            pages.append(current)
            current = [line]
            current_len = len(line)
        else:
            current.append(line)
            current_len += add_len

    if current:
        pages.append(current)
    return pages


def clamp_page_body(body: str, max_chars: int = EMBED_DESCRIPTION_MAX_LENGTH) -> str:
    """Hard-truncate a rendered page body to max_chars, ending with an ellipsis."""
    if len(body) <= max_chars:
        return body
    return body[:max_chars - 3] + "..."
