import pytest

from apps.ranked_leaderboard_bot.common.constants import RANK_EMOJI_MARKUP, UNRANKED_EMOJI_KEY
from apps.ranked_leaderboard_bot.leaderboard import (
    format_leaderboard_line,
    format_rank_summary,
    resolve_rank_emoji,
    validate_rank_emoji_table,
)
from libs.riot_api import RankInfo


@pytest.mark.parametrize("args, expected", [
    (("Faker", "CHALLENGER", "I", 1500, 1), "1. Faker : CHALLENGER - 1500 LP"),
    (("Bob", "GOLD", "II", 40, 2), "2. Bob : GOLD II - 40 LP"),
    (("Zero", "SILVER", "IV", 0, 3), "3. Zero : SILVER IV"),
    (("Nobody", None, None, None, 4), "4. Nobody : Unranked"),
])
def test_format_leaderboard_line(args, expected):
    assert format_leaderboard_line(*args) == expected


def test_format_leaderboard_line_with_marker():
    line = format_leaderboard_line("Bob", "GOLD", "II", 40, 2, marker="<:gold:1>")

    assert line == "2. <:gold:1> Bob : GOLD II - 40 LP"


def test_format_rank_summary():
    assert format_rank_summary(RankInfo("DIAMOND", "III", 75)) == "DIAMOND III - 75 LP"
    assert format_rank_summary(RankInfo.unranked()) == "Unranked"


def test_resolve_rank_emoji_known_tier():
    assert resolve_rank_emoji("gold") == RANK_EMOJI_MARKUP["GOLD"]


@pytest.mark.parametrize("tier", [None, "", "WOOD"])
def test_resolve_rank_emoji_falls_back_to_unranked(tier):
    assert resolve_rank_emoji(tier) == RANK_EMOJI_MARKUP[UNRANKED_EMOJI_KEY]


def test_validate_rank_emoji_table_passes():
    validate_rank_emoji_table()


def test_validate_rank_emoji_table_reports_missing_tier(monkeypatch):
    monkeypatch.delitem(RANK_EMOJI_MARKUP, "EMERALD")

    with pytest.raises(ValueError, match="EMERALD"):
        validate_rank_emoji_table()
