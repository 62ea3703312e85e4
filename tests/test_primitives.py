"""Tests for the matching-block engine and score type."""

import pytest

from fuzzscore.primitives import (
    MatchingBlock,
    Score,
    ScoreRangeError,
    find_longest_match,
    get_matching_blocks,
    percent,
    simple_ratio,
)


class TestScore:
    """Score construction and range checks."""

    def test_valid_bounds(self):
        assert Score(0) == 0
        assert Score(100) == 100
        assert isinstance(Score(42), int)

    @pytest.mark.parametrize("value", [-1, 101, 255])
    def test_out_of_range_raises(self, value):
        with pytest.raises(ScoreRangeError):
            Score(value)

    def test_range_error_is_value_error(self):
        assert issubclass(ScoreRangeError, ValueError)

    def test_percent_rounds_half_up(self):
        assert percent(4, 6) == 67
        assert percent(1, 8) == 13  # 12.5
        assert percent(3, 8) == 38  # 37.5


class TestFindLongestMatch:
    """Longest-run search and its tie-breaking."""

    def test_full_prefix(self):
        a, b = "foo bar", "foo bar baz"
        assert find_longest_match(a, b, 0, len(a), 0, len(b)) == (0, 0, 7)

    def test_earliest_in_first_sequence_wins(self):
        # "bar" and " ba" both have length 3; " ba" starts earlier in a
        a, c = "foo bar", "bar baz"
        assert find_longest_match(a, c, 0, len(a), 0, len(c)) == (3, 3, 3)

    def test_match_inside_longer(self):
        c, b = "bar baz", "foo bar baz"
        assert find_longest_match(c, b, 0, len(c), 0, len(b)) == (0, 4, 7)

    def test_earliest_in_second_sequence_wins(self):
        assert find_longest_match("ab", "xabab", 0, 2, 0, 5) == (0, 1, 2)

    def test_no_match_anchors_at_lows(self):
        assert find_longest_match("abc", "xyz", 1, 3, 2, 3) == MatchingBlock(1, 2, 0)

    def test_window_narrower_than_span(self):
        assert find_longest_match("abcd", "xab", 0, 4, 0, 3) == (0, 1, 2)

    def test_tuples(self):
        a = ("new", "york", "mets")
        b = ("the", "new", "york", "mets")
        assert find_longest_match(a, b, 0, 3, 0, 4) == (0, 1, 3)


class TestGetMatchingBlocks:
    """Recursive block collection."""

    def test_blocks_with_gap(self):
        assert get_matching_blocks("abxcd", "abcd") == [(0, 0, 2), (3, 2, 2), (5, 4, 0)]
        assert get_matching_blocks("abcd", "abxcd") == [(0, 0, 2), (2, 3, 2), (4, 5, 0)]

    def test_non_ascii_prefix(self):
        assert get_matching_blocks("chance", "\u30b9\u30de\u30db\u3067chance") == [(0, 4, 6), (6, 10, 0)]

    def test_equal_sequences(self):
        assert get_matching_blocks("abc", "abc") == [(0, 0, 3), (3, 3, 0)]

    def test_no_common_units(self):
        assert get_matching_blocks("abc", "xyz") == [(3, 3, 0)]

    def test_empty(self):
        assert get_matching_blocks("", "") == [(0, 0, 0)]
        assert get_matching_blocks("", "abc") == [(0, 3, 0)]

    def test_returns_matching_block_tuples(self):
        blocks = get_matching_blocks("hello", "jello")
        assert all(isinstance(b, MatchingBlock) for b in blocks)
        assert blocks[0].size == 4

    @pytest.mark.parametrize("a,b", [
        ("what about supercalifragilisticexpialidocious",
         "supercalifragilisticexpialidocious about what"),
        ("the quick brown fox", "a quick brown dog jumps"),
        ("mississippi", "missouri mississippi"),
        ("abcabcabc", "cbacbacba"),
    ])
    def test_sorted_non_overlapping_with_sentinel(self, a, b):
        blocks = get_matching_blocks(a, b)
        assert blocks[-1] == (len(a), len(b), 0)
        assert all(block.size > 0 for block in blocks[:-1])
        for prev, nxt in zip(blocks, blocks[1:]):
            assert prev.a + prev.size <= nxt.a
            assert prev.b + prev.size <= nxt.b
        for block in blocks[:-1]:
            assert a[block.a:block.a + block.size] == b[block.b:block.b + block.size]


class TestSimpleRatio:
    """Whole-sequence ratio."""

    def test_empty_pair_is_100(self):
        assert simple_ratio("", "") == 100

    def test_one_empty_is_0(self):
        assert simple_ratio("", "abc") == 0
        assert simple_ratio((), ("a",)) == 0

    def test_partial_overlap(self):
        assert simple_ratio("cd", "abcd") == 67

    def test_word_sequences(self):
        assert simple_ratio(("new", "york", "mets"), ("the", "new", "york", "mets")) == 86
