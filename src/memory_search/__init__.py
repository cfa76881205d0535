"""
Memory Search - lightweight relevance ranking for stored memory records.

No embedding model, no external index, no network calls: a query is matched
against a bounded pool of recent records with lexical heuristics
(exact, partial, synonym, fuzzy and phrase-context matching).

Usage:
    from memory_search import MemorySearch, InMemoryRecordSource

    search = MemorySearch(InMemoryRecordSource(records))
    results = await search.search("user preferences", limit=3)
"""

from .models import InvalidArgumentError, MatchType, Record, ScoredResult
from .ranking import rank, normalize
from .service import MemorySearch, SearchRequest, format_results
from .sources import InMemoryRecordSource, RecordSource

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "MatchType",
    "Record",
    "ScoredResult",
    "rank",
    "normalize",
    "MemorySearch",
    "SearchRequest",
    "format_results",
    "InMemoryRecordSource",
    "RecordSource",
]
