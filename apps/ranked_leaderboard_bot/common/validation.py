"""
Input validation utilities for Discord bot commands.
"""

from typing import Tuple

# Riot ID limits: game name 3-16 characters, tag line 3-5 characters
GAME_NAME_MAX_LENGTH = 16
TAG_LINE_MAX_LENGTH = 5


def validate_riot_id(game_name: str, tag_line: str) -> Tuple[str, str]:
    """
    Validate and normalize a Riot ID.

    A leading '#' on the tag line is accepted and stripped.

    Returns:
        Tuple of (game_name, tag_line), stripped

    Raises:
        ValueError: If either part is empty or too long
    """
    normalized_name = (game_name or "").strip()
    normalized_tag = (tag_line or "").strip().lstrip("#").strip()

    if not normalized_name or not normalized_tag:
        raise ValueError("Both a username and a tag are required, e.g. `Faker` and `KR1`.")
    if len(normalized_name) > GAME_NAME_MAX_LENGTH:
        raise ValueError(
            f"Invalid username: `{normalized_name}`. Must be at most {GAME_NAME_MAX_LENGTH} characters."
        )
    if len(normalized_tag) > TAG_LINE_MAX_LENGTH:
        raise ValueError(
            f"Invalid tag: `{normalized_tag}`. Must be at most {TAG_LINE_MAX_LENGTH} characters."
        )
    return normalized_name, normalized_tag
