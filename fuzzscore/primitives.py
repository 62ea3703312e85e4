"""
Sequence alignment primitives.

The matcher follows difflib's recursive longest-block strategy without the
junk heuristics. It is deliberately not an optimal alignment: the scores built
on top of it depend on its exact tie-breaking, so keep the search order intact.
"""

from typing import List, NamedTuple, Sequence


class ScoreRangeError(ValueError):
    """Raised when a score outside [0, 100] is constructed."""
    pass


class Score(int):
    """Integer similarity percentage in [0, 100]."""

    MAX = 100

    def __new__(cls, value: int):
        if not 0 <= value <= cls.MAX:
            raise ScoreRangeError(f"score must be within [0, {cls.MAX}], got {value!r}")
        return super().__new__(cls, value)


class MatchingBlock(NamedTuple):
    a: int
    b: int
    size: int


def percent(part: int, whole: int) -> int:
    """Round 100 * part / whole half up, in integer arithmetic."""
    return (200 * part + whole) // (2 * whole)


def round_half_up(value: float) -> int:
    return int(value + 0.5)


def find_longest_match(seq1: Sequence, seq2: Sequence,
                       lo1: int, hi1: int, lo2: int, hi2: int) -> MatchingBlock:
    """
    Longest run shared by seq1[lo1:hi1] and seq2[lo2:hi2].

    Candidate sizes are tried from largest to smallest. For each size the
    offsets in seq1 are scanned left to right and the first one found in the
    seq2 window wins, at its leftmost position there. So among all maximal
    runs the result starts earliest in seq1, then earliest in seq2.
    No match gives a zero-size block at (lo1, lo2).
    """
    window = seq2[lo2:hi2]
    width = hi2 - lo2
    searchable = isinstance(window, (str, bytes))
    for size in range(min(hi1 - lo1, width), 0, -1):
        for start in range(lo1, hi1 - size + 1):
            piece = seq1[start:start + size]
            if searchable:
                offset = window.find(piece)
                if offset != -1:
                    return MatchingBlock(start, lo2 + offset, size)
                continue
            for offset in range(width - size + 1):
                if window[offset:offset + size] == piece:
                    return MatchingBlock(start, lo2 + offset, size)
    return MatchingBlock(lo1, lo2, 0)


def get_matching_blocks(seq1: Sequence, seq2: Sequence) -> List[MatchingBlock]:
    """
    Non-overlapping runs shared by seq1 and seq2, sorted, adjacent runs merged.

    The last block is always the sentinel (len(seq1), len(seq2), 0).

    >>> get_matching_blocks("abxcd", "abcd")
    [MatchingBlock(a=0, b=0, size=2), MatchingBlock(a=3, b=2, size=2), MatchingBlock(a=5, b=4, size=0)]
    """
    flipped = len(seq1) > len(seq2)
    shorter, longer = (seq2, seq1) if flipped else (seq1, seq2)
    len1, len2 = len(shorter), len(longer)

    queue = [(0, len1, 0, len2)]
    found = []
    while queue:
        lo1, hi1, lo2, hi2 = queue.pop()
        i, j, k = find_longest_match(shorter, longer, lo1, hi1, lo2, hi2)
        if k:
            found.append((i, j, k))
            if lo1 < i and lo2 < j:
                queue.append((lo1, i, lo2, j))
            if i + k < hi1 and j + k < hi2:
                queue.append((i + k, hi1, j + k, hi2))
    found.sort()

    merged = []
    i1 = j1 = k1 = 0
    for i2, j2, k2 in found:
        if i1 + k1 == i2 and j1 + k1 == j2:
            k1 += k2
        else:
            if k1:
                merged.append((i1, j1, k1))
            i1, j1, k1 = i2, j2, k2
    if k1:
        merged.append((i1, j1, k1))
    merged.append((len1, len2, 0))

    if flipped:
        return [MatchingBlock(j, i, k) for i, j, k in merged]
    return [MatchingBlock(i, j, k) for i, j, k in merged]


def simple_ratio(seq1: Sequence, seq2: Sequence) -> Score:
    """
    Twice the matched units over the total units, as a percentage.

    Equal sequences (including two empty ones) score 100; one empty
    sequence against a non-empty one scores 0.
    """
    if seq1 == seq2:
        return Score(100)
    if not seq1 or not seq2:
        return Score(0)
    # equal lengths: canonical operand order keeps the score symmetric
    if len(seq1) == len(seq2) and seq2 < seq1:
        seq1, seq2 = seq2, seq1
    matched = sum(block.size for block in get_matching_blocks(seq1, seq2))
    return Score(percent(2 * matched, len(seq1) + len(seq2)))
