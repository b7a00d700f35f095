from datetime import datetime, timezone

import pytest

from clipstack.fuzzy import fuzzy_match, search
from clipstack.history import ClipboardEntry


def make_entry(entry_id, content):
    return ClipboardEntry(entry_id, content, datetime.now(timezone.utc))


def test_empty_query_returns_all():
    entries = [make_entry(1, "hello"), make_entry(2, "world"), make_entry(3, "foo")]
    results = search("", entries)
    assert len(results) == 3
    assert [e.id for e, _ in results] == [1, 2, 3]
    assert all(score == 0 for _, score in results)


def test_fuzzy_match_filters():
    entries = [
        make_entry(1, "hello world"),
        make_entry(2, "goodbye world"),
        make_entry(3, "foo bar"),
    ]
    results = search("helo", entries)
    assert results
    assert any(e.content == "hello world" for e, _ in results)
    assert all(e.content != "foo bar" for e, _ in results)


def test_no_match_returns_empty():
    entries = [make_entry(1, "hello"), make_entry(2, "world")]
    assert search("zzzzz", entries) == []


def test_results_sorted_by_score():
    entries = [make_entry(1, "abc"), make_entry(2, "abcdef"), make_entry(3, "xyzabc")]
    results = search("abc", entries)
    assert len(results) >= 2
    scores = [score for _, score in results]
    assert scores == sorted(scores, reverse=True)


def test_scores_match_fuzzy_match():
    entries = [make_entry(1, "alpha beta"), make_entry(2, "a long b")]
    for entry, score in search("ab", entries):
        assert score == fuzzy_match(entry.content, "ab")


def test_ties_keep_original_order():
    entries = [make_entry(1, "same"), make_entry(2, "same"), make_entry(3, "same")]
    assert [e.id for e, _ in search("sam", entries)] == [1, 2, 3]


@pytest.mark.parametrize(
    "choice, pattern",
    [("hello", "zzzzz"), ("abc", "cba"), ("", "a"), ("ab", "abc")],
)
def test_non_subsequence_is_none(choice, pattern):
    assert fuzzy_match(choice, pattern) is None


def test_empty_pattern_scores_zero():
    assert fuzzy_match("anything", "") == 0


def test_lowercase_pattern_ignores_case():
    assert fuzzy_match("HELLO", "hello") is not None
    assert fuzzy_match("HELLO", "hello") > 0


def test_uppercase_pattern_is_case_sensitive():
    assert fuzzy_match("hello", "Hello") is None
    assert fuzzy_match("Hello", "Hello") is not None


def test_consecutive_beats_scattered():
    assert fuzzy_match("abc", "abc") > fuzzy_match("axbxc", "abc")


def test_word_start_beats_mid_word():
    assert fuzzy_match("foo bar", "b") > fuzzy_match("foobar", "b")