"""
Score a query against many choices.

The iteration, cutoff filtering and ranking are delegated to
``rapidfuzz.process``; the scores come from ``fuzzscore.fuzz``.
"""

import logging
from typing import Callable, List, Mapping, Optional, Sequence, Tuple, Union

from rapidfuzz import process as rf_process

from .fuzz import wratio
from .text import full_process

logger = logging.getLogger(__name__)

Choices = Union[Sequence[str], Mapping]
Processor = Callable[[str], str]
Scorer = Callable[[str, str], int]


def default_processor(text: str) -> str:
    return full_process(text, force_ascii=False)


def _rapidfuzz_scorer(scorer: Scorer):
    # rapidfuzz passes processor/score_cutoff keywords and filters on the cutoff itself
    def _score(query, choice, **_kwargs):
        return int(scorer(query, choice))

    return _score


def _check_query(query: str, processor: Optional[Processor]) -> None:
    if processor is not None and not processor(query):
        logger.warning(
            "Applied processor reduces input query to empty string, "
            "all comparisons will have score 0. [Query: '%s']", query
        )


def _shape(results, choices: Choices) -> List[Tuple]:
    if isinstance(choices, Mapping):
        return [(choice, score, key) for choice, score, key in results]
    return [(choice, score) for choice, score, _ in results]


def extract_without_order(query: str, choices: Choices,
                          processor: Optional[Processor] = default_processor,
                          scorer: Scorer = wratio,
                          score_cutoff: int = 0) -> List[Tuple]:
    """
    Score every choice against the query, keeping those at or above score_cutoff.

    Results come back in input order as (choice, score) tuples, or
    (choice, score, key) when choices is a mapping. The processor is applied
    to the query and to each choice before scoring; pass None to skip it.
    """
    _check_query(query, processor)
    results = rf_process.extract_iter(
        query, choices,
        scorer=_rapidfuzz_scorer(scorer),
        processor=processor,
        score_cutoff=score_cutoff,
    )
    return _shape(results, choices)


def extract(query: str, choices: Choices,
            processor: Optional[Processor] = default_processor,
            scorer: Scorer = wratio,
            limit: Optional[int] = 5,
            score_cutoff: int = 0) -> List[Tuple]:
    """Best `limit` choices, highest score first; ties keep input order."""
    _check_query(query, processor)
    results = rf_process.extract(
        query, choices,
        scorer=_rapidfuzz_scorer(scorer),
        processor=processor,
        limit=limit,
        score_cutoff=score_cutoff,
    )
    logger.debug("Extracted %d of %d choices for %r", len(results), len(choices), query)
    return _shape(results, choices)


def extract_one(query: str, choices: Choices,
                processor: Optional[Processor] = default_processor,
                scorer: Scorer = wratio,
                score_cutoff: int = 0) -> Optional[Tuple]:
    """Single best choice, or None when nothing reaches score_cutoff. The first of equal scores wins."""
    _check_query(query, processor)
    result = rf_process.extractOne(
        query, choices,
        scorer=_rapidfuzz_scorer(scorer),
        processor=processor,
        score_cutoff=score_cutoff,
    )
    if result is None:
        return None
    return _shape([result], choices)[0]
