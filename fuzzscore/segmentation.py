"""
Segmenters split a string into the units compared by the matching engine.

Two strings that look identical can still differ at the unit level:
"\u00e4" (one code point) and "a\u0308" (two code points) share no bytes and
no code points, and even their grapheme clusters compare unequal. Apply a
normalizer (see ``fuzzscore.text``) before segmenting when that matters.
"""

from typing import Callable, Dict, Sequence, Tuple

import regex

Segmenter = Callable[[str], Sequence]

_grapheme_re = regex.compile(r"\X")


def by_bytes(text: str) -> bytes:
    """UTF-8 bytes of the text."""
    return text.encode("utf-8")


def by_code_points(text: str) -> str:
    # a str is already an indexable sequence of code points
    return text


def by_graphemes(text: str) -> Tuple[str, ...]:
    """Extended grapheme clusters, e.g. "a\u0308" is a single unit."""
    return tuple(_grapheme_re.findall(text))


def by_words(text: str) -> Tuple[str, ...]:
    return tuple(text.split())


SEGMENTERS: Dict[str, Segmenter] = {
    "bytes": by_bytes,
    "code_points": by_code_points,
    "graphemes": by_graphemes,
    "words": by_words,
}

DEFAULT_SEGMENTER = by_code_points


def get_segmenter(name: str) -> Segmenter:
    try:
        return SEGMENTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown segmenter {name!r}; expected one of {sorted(SEGMENTERS)}"
        ) from None
