"""
String similarity scorers, each returning an integer score in [0, 100].

The results are kept compatible with fuzzywuzzy, including its quirks:
partial_ratio only tries windows anchored at existing matching blocks, so
partial_ratio(a, b) and partial_ratio(b, a) can disagree.
"""

from typing import Callable, Dict

from .primitives import Score, get_matching_blocks, round_half_up, simple_ratio
from .segmentation import DEFAULT_SEGMENTER, Segmenter
from .text import Normalizer, full_process as process_text, passthrough, token_set

# token based scores never beat an equally good full-string match
TOKEN_SCALE = 0.95
PARTIAL_SCALE = 0.9
LONG_PARTIAL_SCALE = 0.6
PARTIAL_LENGTH_RATIO = 1.5
LONG_LENGTH_RATIO = 8.0


def _trivial(s1: str, s2: str):
    """Score for the degenerate cases, or None when a real comparison is needed."""
    if s1 == s2:
        return Score(100)
    if not s1 or not s2:
        return Score(0)
    return None


def ratio(s1: str, s2: str,
          normalizer: Normalizer = passthrough,
          segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """
    Similarity of the whole strings.

    >>> ratio("cd", "abcd")
    67
    """
    trivial = _trivial(s1, s2)
    if trivial is not None:
        return trivial
    return simple_ratio(segmenter(normalizer(s1)), segmenter(normalizer(s2)))


def partial_ratio(s1: str, s2: str,
                  normalizer: Normalizer = passthrough,
                  segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """
    Similarity of the shorter string against its best-matching window of the longer one.

    Windows are only tried where a matching block anchors them, which is why
    the result is not symmetric:

    >>> partial_ratio("what about supercalifragilisticexpialidocious",
    ...               "supercalifragilisticexpialidocious about what")
    76
    >>> partial_ratio("supercalifragilisticexpialidocious about what",
    ...               "what about supercalifragilisticexpialidocious")
    86
    """
    trivial = _trivial(s1, s2)
    if trivial is not None:
        return trivial
    seg1 = segmenter(normalizer(s1))
    seg2 = segmenter(normalizer(s2))
    shorter, longer = (seg1, seg2) if len(seg1) <= len(seg2) else (seg2, seg1)

    best = 0
    # the trailing sentinel block anchors no window
    for i, j, _ in get_matching_blocks(shorter, longer)[:-1]:
        start = max(j - i, 0)
        window = longer[start:start + len(shorter)]
        score = simple_ratio(shorter, window)
        if score > 99:
            return Score(100)
        best = max(best, score)
    return Score(best)


def _process_and_sort(text: str, force_ascii: bool, full_process: bool) -> str:
    if full_process:
        text = process_text(text, force_ascii=force_ascii)
    return " ".join(sorted(text.split()))


def _token_sort(s1, s2, partial, force_ascii, full_process, segmenter):
    sorted1 = _process_and_sort(s1, force_ascii, full_process)
    sorted2 = _process_and_sort(s2, force_ascii, full_process)
    if partial:
        return partial_ratio(sorted1, sorted2, segmenter=segmenter)
    return ratio(sorted1, sorted2, segmenter=segmenter)


def token_sort_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True,
                     segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """ratio of the strings after sorting their tokens.

    >>> token_sort_ratio("hello world", "world hello")
    100
    """
    return _token_sort(s1, s2, False, force_ascii, full_process, segmenter)


def partial_token_sort_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True,
                             segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """partial_ratio of the strings after sorting their tokens."""
    return _token_sort(s1, s2, True, force_ascii, full_process, segmenter)


def _token_set(s1, s2, partial, force_ascii, full_process, segmenter):
    """
    Compare the shared tokens with each side's shared-plus-own tokens.

    Three strings are built from the token sets, each part sorted:
    the intersection, the intersection followed by the tokens only in s1,
    and the intersection followed by the tokens only in s2. The best pairwise
    score wins, so extra tokens on one side cost little.
    """
    trivial = _trivial(s1, s2)
    if trivial is not None:
        return trivial
    if full_process:
        s1 = process_text(s1, force_ascii=force_ascii)
        s2 = process_text(s2, force_ascii=force_ascii)
    tokens1 = token_set(s1)
    tokens2 = token_set(s2)

    intersection = " ".join(sorted(tokens1 & tokens2))
    only_in_1 = " ".join(sorted(tokens1 - tokens2))
    only_in_2 = " ".join(sorted(tokens2 - tokens1))
    combined_1 = f"{intersection} {only_in_1}" if only_in_1 else intersection
    combined_2 = f"{intersection} {only_in_2}" if only_in_2 else intersection

    scorer = partial_ratio if partial else ratio
    return max(
        scorer(intersection, combined_1, segmenter=segmenter),
        scorer(intersection, combined_2, segmenter=segmenter),
        scorer(combined_1, combined_2, segmenter=segmenter),
    )


def token_set_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True,
                    segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """
    >>> token_set_ratio("new york mets vs atlanta braves", "atlanta braves vs new york mets")
    100
    """
    return _token_set(s1, s2, False, force_ascii, full_process, segmenter)


def partial_token_set_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True,
                            segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    return _token_set(s1, s2, True, force_ascii, full_process, segmenter)


def qratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True) -> Score:
    """Quick ratio: ratio of the processed strings, 0 if either processes to nothing."""
    p1 = process_text(s1, force_ascii=force_ascii) if full_process else s1
    p2 = process_text(s2, force_ascii=force_ascii) if full_process else s2
    if not p1 or not p2:
        return Score(0)
    return ratio(p1, p2)


def uqratio(s1: str, s2: str, full_process: bool = True) -> Score:
    return qratio(s1, s2, force_ascii=False, full_process=full_process)


def wratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True,
           segmenter: Segmenter = DEFAULT_SEGMENTER) -> Score:
    """
    Weighted blend of the other scorers; picks the best after scaling.

    1. Process both strings; if either ends up empty the score is 0
       (so wratio("", "") == 0 even though ratio("", "") == 100).
    2. Take the plain ratio.
    3. With a length ratio under 1.5, add token_sort_ratio and
       token_set_ratio scaled by 0.95.
    4. Otherwise use partial_ratio scaled by 0.9 (0.6 above a length ratio
       of 8) and the partial token scorers scaled by that and by 0.95.
    5. Return the rounded maximum.

    >>> wratio("hello world", "world hello")
    95
    """
    p1 = process_text(s1, force_ascii=force_ascii) if full_process else s1
    p2 = process_text(s2, force_ascii=force_ascii) if full_process else s2
    if not p1 or not p2:
        return Score(0)

    base = ratio(p1, p2, segmenter=segmenter)
    len1, len2 = len(segmenter(p1)), len(segmenter(p2))
    if not min(len1, len2):
        return base
    length_ratio = max(len1, len2) / min(len1, len2)

    if length_ratio < PARTIAL_LENGTH_RATIO:
        tsor = token_sort_ratio(p1, p2, full_process=False, segmenter=segmenter) * TOKEN_SCALE
        tser = token_set_ratio(p1, p2, full_process=False, segmenter=segmenter) * TOKEN_SCALE
        return Score(round_half_up(max(base, tsor, tser)))

    partial_scale = LONG_PARTIAL_SCALE if length_ratio > LONG_LENGTH_RATIO else PARTIAL_SCALE
    partial = partial_ratio(p1, p2, segmenter=segmenter) * partial_scale
    ptsor = partial_token_sort_ratio(p1, p2, full_process=False,
                                     segmenter=segmenter) * TOKEN_SCALE * partial_scale
    ptser = partial_token_set_ratio(p1, p2, full_process=False,
                                    segmenter=segmenter) * TOKEN_SCALE * partial_scale
    return Score(round_half_up(max(base, partial, ptsor, ptser)))


def uwratio(s1: str, s2: str, full_process: bool = True) -> Score:
    return wratio(s1, s2, force_ascii=False, full_process=full_process)


SCORERS: Dict[str, Callable[..., Score]] = {
    "ratio": ratio,
    "partial_ratio": partial_ratio,
    "token_sort_ratio": token_sort_ratio,
    "partial_token_sort_ratio": partial_token_sort_ratio,
    "token_set_ratio": token_set_ratio,
    "partial_token_set_ratio": partial_token_set_ratio,
    "qratio": qratio,
    "uqratio": uqratio,
    "wratio": wratio,
    "uwratio": uwratio,
}


def get_scorer(name: str) -> Callable[..., Score]:
    try:
        return SCORERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown scorer {name!r}; expected one of {sorted(SCORERS)}"
        ) from None
