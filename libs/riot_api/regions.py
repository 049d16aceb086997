"""
Routing of Riot ID tag lines to League of Legends platform hosts.
"""

from typing import List, Tuple

DEFAULT_PLATFORM = "euw1"

# Checked in order, first matching prefix wins
TAG_PREFIX_PLATFORMS: List[Tuple[str, str]] = [
    ("EUW", "euw1"),
    ("EUNE", "eun1"),
    ("NA", "na1"),
    ("BR", "br1"),
    ("LA1", "la1"),
    ("LA2", "la2"),
    ("LAN", "la1"),
    ("LAS", "la2"),
    ("OCE", "oc1"),
    ("OC1", "oc1"),
    ("TR", "tr1"),
    ("RU", "ru"),
    ("KR", "kr"),
    ("JP", "jp1"),
]


def platform_from_tag(tag: str) -> str:
    """Return the platform routing value (e.g. "euw1") for a Riot ID tag line."""
    normalized = str(tag or "").strip().upper()
    for prefix, platform in TAG_PREFIX_PLATFORMS:
        if normalized.startswith(prefix):
            return platform
    return DEFAULT_PLATFORM
