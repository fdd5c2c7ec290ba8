import pytest

from buscador.indexer import index_text
from buscador.search import Match, context_lines, find_line, search_words

TEXT = "alpha beta gamma\ndelta alpha\n"


def test_find_line_inside_lines():
    offsets = [0, 10, 20]
    assert find_line(offsets, 0) == 0
    assert find_line(offsets, 9) == 0
    assert find_line(offsets, 10) == 1
    assert find_line(offsets, 25) == 2


def test_find_line_before_first_line_raises():
    with pytest.raises(ValueError):
        find_line([5, 10], 2)


def test_find_line_no_lines_raises():
    with pytest.raises(ValueError):
        find_line([], 0)


def test_context_lines_middle_has_neighbours():
    lines = ["a\n", "b\n", "c\n"]
    assert context_lines(lines, [0, 2, 4], 3) == [(1, "a\n"), (2, "b\n"), (3, "c\n")]


def test_context_lines_first_and_last():
    lines = ["a\n", "b\n", "c\n"]
    assert context_lines(lines, [0, 2, 4], 0) == [(1, "a\n"), (2, "b\n")]
    assert context_lines(lines, [0, 2, 4], 5) == [(2, "b\n"), (3, "c\n")]


def test_search_finds_each_window():
    index = index_text(TEXT)
    matches = search_words(index, ["alpha", "gamma"])
    assert [m.position for m in matches] == [TEXT.index("alpha"), TEXT.index("gamma")]
    assert all(isinstance(m, Match) for m in matches)


def test_match_carries_line_and_context():
    index = index_text(TEXT)
    matches = search_words(index, ["delta"])
    assert len(matches) == 1
    match = matches[0]
    assert match.line == 1
    assert match.context == ((1, "alpha beta gamma\n"), (2, "delta alpha\n"))


def test_single_word_returns_every_position():
    index = index_text(TEXT)
    positions = [m.position for m in search_words(index, ["alpha"])]
    assert positions == [TEXT.index("alpha"), TEXT.rindex("alpha")]
    assert all(TEXT.startswith("alpha", p) for p in positions)


def test_missing_word_gives_no_results():
    index = index_text(TEXT)
    assert search_words(index, ["alpha", "omega"]) == []


def test_empty_query_gives_no_results():
    assert search_words(index_text(TEXT), []) == []


def test_window_limits_distance():
    text = "first " + "x" * 150 + " second\n"
    index = index_text(text)
    assert search_words(index, ["first", "second"]) == []
    wide = search_words(index, ["first", "second"], window=1000)
    assert [m.position for m in wide] == [0]


def test_max_results_caps_output():
    text = "word " * 50
    index = index_text(text)
    assert len(search_words(index, ["word"])) == 50
    assert len(search_words(index, ["word"], max_results=7)) == 7


def test_lowercase_index_matches_any_case():
    index = index_text("Alpha BETA\n", lowercase=True)
    matches = search_words(index, ["ALPHA", "beta"])
    assert [m.position for m in matches] == [0]


def test_matches_stay_within_window():
    text = "cats and dogs live here. " * 10 + "\n"
    index = index_text(text)
    for match in search_words(index, ["cats", "dogs", "live"], window=20):
        assert text.startswith(("cats", "dogs", "live"), match.position)
        assert "cats" in text[match.position:match.position + 25]