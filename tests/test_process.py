"""Tests for extracting the best choices for a query."""

import logging

import pytest

from fuzzscore.fuzz import ratio
from fuzzscore.process import (
    default_processor,
    extract,
    extract_one,
    extract_without_order,
)

FRUIT = ["banana split", "apple pie", "cherry tart"]


def exact(a, b):
    return 100 if a == b else 0


class TestExtractWithoutOrder:
    """Scoring every choice in input order."""

    def test_keeps_input_order(self):
        result = extract_without_order("bar", ["foo", "bar", "baz"], processor=None, scorer=exact)
        assert [choice for choice, _ in result] == ["foo", "bar", "baz"]
        assert [score for _, score in result] == [0, 100, 0]

    def test_score_cutoff(self):
        result = extract_without_order("bar", ["foo", "bar", "baz"], processor=None,
                                       scorer=exact, score_cutoff=1)
        assert result == [("bar", 100)]

    def test_mapping_returns_keys(self):
        result = extract_without_order("bar", {"x": "foo", "y": "bar"}, processor=None,
                                       scorer=exact, score_cutoff=1)
        assert result == [("bar", 100, "y")]

    def test_empty_choices(self):
        assert extract_without_order("bar", []) == []


class TestExtract:
    """Ranked extraction."""

    def test_best_first(self):
        result = extract("apple pie", FRUIT, limit=2)
        assert len(result) == 2
        assert result[0] == ("apple pie", 100)

    def test_no_limit_returns_all_sorted(self):
        result = extract("apple pie", FRUIT, limit=None)
        scores = [score for _, score in result]
        assert len(result) == 3
        assert scores == sorted(scores, reverse=True)

    def test_ties_keep_input_order(self):
        choices = {"first": "abc", "second": "abc", "third": "xyz"}
        result = extract("abc", choices, processor=None, scorer=exact, limit=2)
        assert [key for _, _, key in result] == ["first", "second"]


class TestExtractOne:
    """Single best choice."""

    def test_exact_choice_wins(self):
        assert extract_one("apple pie", FRUIT) == ("apple pie", 100)

    def test_first_of_equal_scores_wins(self):
        assert extract_one("abc", {"a": "abc", "b": "abc"}) == ("abc", 100, "a")

    def test_processor_applies_to_query_and_choices(self):
        assert extract_one("APPLE PIE!", ["Apple Pie"], scorer=ratio) == ("Apple Pie", 100)
        assert extract_one("APPLE PIE!", ["Apple Pie"], processor=None, scorer=ratio)[1] < 100

    def test_nothing_above_cutoff(self):
        assert extract_one("apple pie", ["zzz"], score_cutoff=50) is None

    def test_empty_choices(self):
        assert extract_one("apple pie", []) is None

    def test_empty_processed_query_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fuzzscore.process"):
            extract_one("!!!", ["abc"])
        assert "reduces input query to empty string" in caplog.text


def test_default_processor_keeps_non_ascii():
    assert default_processor("\u00c7a Va?") == "\u00e7a va"
