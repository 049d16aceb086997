import pytest

from apps.ranked_leaderboard_bot.common.constants import RANK_ORDER, UNRANKED_LABEL
from apps.ranked_leaderboard_bot.leaderboard import (
    UNKNOWN_RANK_INDEX,
    classify_rank,
    rank_index,
    sort_leaderboard,
)

from tests.conftest import make_record


def test_rank_order_has_every_tier_and_division():
    assert len(RANK_ORDER) == 32
    assert RANK_ORDER[:4] == ["CHALLENGER", "GRANDMASTER", "MASTER", "DIAMOND I"]
    assert RANK_ORDER[-2:] == ["IRON IV", UNRANKED_LABEL]


@pytest.mark.parametrize("rank_key", RANK_ORDER[:-1])
def test_classify_rank_accepts_every_ranked_entry(rank_key):
    tier, _, division = rank_key.partition(" ")
    assert classify_rank(tier, division or None) == rank_key


@pytest.mark.parametrize("tier", ["CHALLENGER", "GRANDMASTER", "MASTER"])
@pytest.mark.parametrize("division", [None, "I", "IV", "garbage"])
def test_apex_tiers_ignore_division(tier, division):
    assert classify_rank(tier, division) == tier


@pytest.mark.parametrize("tier, division", [
    (None, None),
    ("", "I"),
    ("WOOD", "I"),
    ("GOLD", None),
    ("GOLD", "V"),
    ("GOLD", ""),
])
def test_unmappable_input_is_unranked(tier, division):
    assert classify_rank(tier, division) == UNRANKED_LABEL


def test_classify_rank_is_case_insensitive():
    assert classify_rank("gold", "ii") == "GOLD II"
    assert classify_rank(" Master ", None) == "MASTER"


def test_rank_index_orders_best_first():
    assert rank_index("CHALLENGER") == 0
    assert rank_index("GOLD I") < rank_index("GOLD IV") < rank_index("SILVER I")
    assert rank_index(UNRANKED_LABEL) == len(RANK_ORDER) - 1


def test_unknown_rank_key_sorts_after_unranked():
    assert rank_index("WOOD IV") == UNKNOWN_RANK_INDEX
    assert rank_index("WOOD IV") > rank_index(UNRANKED_LABEL)


def test_sort_by_rank_then_league_points():
    p1 = make_record("p1", "P1", "GOLD", "II", 40)
    p2 = make_record("p2", "P2", "GOLD", "II", 80)
    p3 = make_record("p3", "P3", "MASTER", "I", 10)

    ordered = sort_leaderboard([p1, p2, p3])

    assert [record.username for record in ordered] == ["P3", "P2", "P1"]


def test_sort_puts_unranked_and_unknown_tiers_last():
    unranked = make_record("u", "Unranked")
    unknown = make_record("w", "Wood", "WOOD", "I", 99)
    iron = make_record("i", "Iron", "IRON", "IV", 0)

    ordered = sort_leaderboard([unranked, unknown, iron])

    assert ordered[0] is iron
    assert {record.puuid for record in ordered[1:]} == {"u", "w"}


def test_sort_treats_missing_league_points_as_zero():
    with_lp = make_record("a", "A", "SILVER", "I", 1)
    without_lp = make_record("b", "B", "SILVER", "I", None)

    assert sort_leaderboard([without_lp, with_lp]) == [with_lp, without_lp]


def test_sort_is_independent_of_input_order():
    records = [
        make_record("a", "Alpha", "GOLD", "I", 50),
        make_record("b", "beta", "GOLD", "I", 50),
        make_record("c", "Charlie", "EMERALD", "III", 12),
        make_record("d", "Delta"),
        make_record("e", "Echo", "CHALLENGER", None, 1200),
    ]

    forward = sort_leaderboard(records)
    backward = sort_leaderboard(list(reversed(records)))

    assert forward == backward
    assert sort_leaderboard(forward) == forward
    assert [record.puuid for record in forward] == ["e", "c", "a", "b", "d"]
