"""
Ranker: scores a candidate pool against a query and returns the top results.

Pure and synchronous - no I/O, no shared mutable state. Candidate fetching
(storage, decryption) happens before this step, in the record source.
"""

import logging
from typing import List, Optional, Sequence

from ..models import InvalidArgumentError, MatchType, Record, ScoredResult
from .scorer import RelevanceScorer
from .tokenizer import normalize_with_surface

logger = logging.getLogger(__name__)

ALL_QUERY = "ALL"
MIN_LIMIT = 1
MAX_LIMIT = 5
DEFAULT_LIMIT = 3

_default_scorer = RelevanceScorer()


def validate_limit(limit) -> int:
    """
    Check that limit is an integer in [1, 5].

    Raises:
        InvalidArgumentError: limit is not an int (bools rejected) or out of range
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidArgumentError(f"limit must be an integer, got {type(limit).__name__}")
    if not MIN_LIMIT <= limit <= MAX_LIMIT:
        raise InvalidArgumentError(f"limit must be between {MIN_LIMIT} and {MAX_LIMIT}, got {limit}")
    return limit


def is_all_query(query) -> bool:
    """True for the "return everything" query (case-insensitive "ALL")"""
    return isinstance(query, str) and query.upper() == ALL_QUERY


def most_recent(candidates: Sequence[Record], limit: int) -> List[ScoredResult]:
    """
    "ALL" bypass: the `limit` most recent records, unscored.

    Every result gets score 1.0 and match type "all".
    """
    ordered = sorted(candidates, key=lambda r: r.timestamp, reverse=True)
    return [
        ScoredResult.from_record(record, 1.0, MatchType.ALL)
        for record in ordered[:limit]
    ]


def rank(
    query: str,
    candidates: Sequence[Record],
    limit: int = DEFAULT_LIMIT,
    scorer: Optional[RelevanceScorer] = None,
) -> List[ScoredResult]:
    """
    Rank candidate records by relevance to query.

    Args:
        query: Free-text query ("ALL" returns the most recent records)
        candidates: Bounded pool of records (e.g. 50 most recent)
        limit: Maximum number of results, 1..5
        scorer: Scorer instance (default: module-level RelevanceScorer)

    Returns:
        Results sorted by relevance_score (descending). Records scoring 0 are
        dropped; ties keep candidate order.

    Raises:
        InvalidArgumentError: limit outside [1, 5]

    Example:
        >>> records = [Record(1, "I like cats", "2025-01-01"),
        ...            Record(2, "I like dogs", "2025-01-02")]
        >>> [r.id for r in rank("cats", records)]
        [1]
    """
    limit = validate_limit(limit)

    if is_all_query(query):
        results = most_recent(candidates, limit)
        logger.debug(f"ALL query: returning {len(results)} most recent of {len(candidates)} candidates")
        return results

    scorer = scorer or _default_scorer

    pairs = normalize_with_surface(query)
    surface_terms = [surface for surface, _ in pairs]
    query_terms = [term for _, term in pairs]

    scored = []
    for record in candidates:
        score, match_type = scorer.score(query_terms, record.content, surface_terms)
        if score > 0:
            scored.append(ScoredResult.from_record(record, score, match_type))

    # sorted() is stable - equal scores keep candidate order
    ranked = sorted(scored, key=lambda r: r.relevance_score, reverse=True)

    logger.debug(
        f"Ranked query terms {query_terms}: {len(scored)}/{len(candidates)} candidates scored > 0, "
        f"returning {min(limit, len(ranked))}"
    )

    return ranked[:limit]
