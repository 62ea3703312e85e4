"""Fuzzy string matching scores compatible with fuzzywuzzy."""

from .fuzz import (
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    qratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
    uqratio,
    uwratio,
    wratio,
)
from .primitives import MatchingBlock, Score, ScoreRangeError, get_matching_blocks
from .process import extract, extract_one, extract_without_order

__version__ = "0.1.0"
