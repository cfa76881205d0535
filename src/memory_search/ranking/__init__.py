"""
Lexical relevance ranking for memory records.

No embeddings, no inverted index: every query is scored against a small,
recency-bounded candidate pool using heuristics.

Components:
- lexicon: Static stopword set and synonym table
- stemmer: Suffix-stripping stemmer
- tokenizer: Text normalization into stemmed terms
- scorer: Exact/partial/synonym/fuzzy/context scoring with length and
  multi-term boosts
- ranker: Scores a candidate pool, filters zero scores, sorts, truncates

Key simplification: no state between calls
- Query and content are re-normalized on every call
- Safe to run any number of rankings in parallel
"""

from .tokenizer import normalize, normalize_with_surface
from .stemmer import stem
from .scorer import RelevanceScorer, similarity
from .ranker import rank, validate_limit, MIN_LIMIT, MAX_LIMIT, DEFAULT_LIMIT

__all__ = [
    "normalize",
    "normalize_with_surface",
    "stem",
    "RelevanceScorer",
    "similarity",
    "rank",
    "validate_limit",
    "MIN_LIMIT",
    "MAX_LIMIT",
    "DEFAULT_LIMIT",
]
