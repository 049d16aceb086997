from apps.ranked_leaderboard_bot.leaderboard import clamp_page_body, paginate_by_chars


def test_empty_input_yields_no_pages():
    assert paginate_by_chars([]) == []


def test_lines_fitting_the_budget_share_a_page():
    assert paginate_by_chars(["a", "b", "c"], max_chars=10) == [["a", "b", "c"]]


def test_page_filled_exactly_to_budget():
    # 4 + newline + 5 == 10
    assert paginate_by_chars(["aaaa", "bbbbb"], max_chars=10) == [["aaaa", "bbbbb"]]


def test_one_character_over_budget_starts_new_page():
    assert paginate_by_chars(["aaaa", "bbbbbb"], max_chars=10) == [["aaaa"], ["bbbbbb"]]


def test_line_of_exactly_budget_length_is_kept_whole():
    assert paginate_by_chars(["abc", "x" * 10], max_chars=10) == [["abc"], ["x" * 10]]


def test_oversized_line_gets_truncated_page_of_its_own():
    pages = paginate_by_chars(["ab", "x" * 15, "cd"], max_chars=10)

    assert pages == [["ab"], ["x" * 9], ["cd"]]


def test_pages_respect_budget_and_preserve_order():
    lines = [f"{i}. player{i} : GOLD {'I' * (i % 4 + 1)} - {i * 7} LP" for i in range(1, 400)]

    pages = paginate_by_chars(lines, max_chars=500)

    assert len(pages) > 1
    assert all(len("\n".join(page)) <= 500 for page in pages)
    assert [line for page in pages for line in page] == lines


def test_clamp_page_body_keeps_short_bodies():
    assert clamp_page_body("short", max_chars=10) == "short"
    assert clamp_page_body("x" * 10, max_chars=10) == "x" * 10


def test_clamp_page_body_truncates_with_ellipsis():
    clamped = clamp_page_body("x" * 20, max_chars=10)

    assert clamped == "x" * 7 + "..."
    assert len(clamped) == 10
