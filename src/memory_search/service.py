"""
Memory search service - async boundary around the ranking engine.

Flow per query:
1. Validate request (query, limit)
2. Await the record source for the candidate pool (N most recent records)
3. Rank the pool (pure, synchronous)

Any suspension happens in step 2 only; a caller wanting a deadline should
wrap search() in asyncio.wait_for(). Source errors propagate unchanged.
"""

import logging
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .config import SearchSettings, load_settings
from .models import InvalidArgumentError, MatchType, ScoredResult
from .ranking import MAX_LIMIT, MIN_LIMIT, RelevanceScorer, rank
from .sources import RecordSource

logger = logging.getLogger(__name__)


class SearchRequest(BaseModel):
    """Validated search request"""
    model_config = ConfigDict(strict=True, frozen=True)

    query: str = Field(..., description="Search query (\"ALL\" = most recent records)", min_length=1)
    limit: int = Field(..., ge=MIN_LIMIT, le=MAX_LIMIT, description="Number of results")


class MemorySearch:
    """
    Search stored memories by relevance.

    Example:
        >>> search = MemorySearch(InMemoryRecordSource(records))
        >>> results = await search.search("user preferences", limit=3)
    """

    def __init__(
        self,
        source: RecordSource,
        settings: Optional[SearchSettings] = None,
        scorer: Optional[RelevanceScorer] = None,
    ):
        """
        Args:
            source: Record source supplying candidate records
            settings: Pool size / default limit (default: load_settings(), i.e. env vars)
            scorer: Relevance scorer (default: RelevanceScorer())
        """
        self.source = source
        self.settings = settings or load_settings()
        self.scorer = scorer or RelevanceScorer()

    def build_request(self, query: str, limit: Optional[int] = None) -> SearchRequest:
        """
        Validate query and limit.

        Raises:
            InvalidArgumentError: empty/non-string query or limit outside [1, 5]
        """
        if limit is None:
            limit = self.settings.default_limit
        try:
            return SearchRequest(query=query, limit=limit)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid search request: {e}") from e

    async def search(self, query: str, limit: Optional[int] = None) -> List[ScoredResult]:
        """
        Search memories.

        Args:
            query: Free-text query, or "ALL" for the most recent records
            limit: Number of results, 1..5 (default: settings.default_limit)

        Returns:
            Ranked results (may be empty)

        Raises:
            InvalidArgumentError: invalid query or limit
            Exception: anything the record source raises, unchanged
        """
        request = self.build_request(query, limit)

        try:
            candidates = await self.source.fetch_recent(self.settings.pool_size)
        except Exception as e:
            logger.error(f"Record source failed for query {request.query!r}: {e}")
            raise

        results = rank(request.query, candidates, request.limit, scorer=self.scorer)

        logger.info(f"Search {request.query!r}: {len(results)} results from {len(candidates)} candidates")
        return results

    async def find_best(self, query: str) -> Optional[ScoredResult]:
        """
        Best matching memory for query, or None.

        Used to locate a memory by its content (e.g. before deleting it).
        """
        results = await self.search(query, limit=1)
        return results[0] if results else None

    async def close(self):
        """Release the record source (connections, etc.)"""
        await self.source.close()
        logger.debug("MemorySearch closed")

    async def __aenter__(self) -> "MemorySearch":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


def format_results(query: str, results: Sequence[ScoredResult]) -> str:
    """
    Render results as plain text for the calling agent.

    Relevance figures are omitted for "all" results (not meaningful there).

    Example:
        >>> print(format_results("cats", [result]))
        Found 1 relevant memories (semantic search):

        Memory 1 (ID: 1):
        I like cats
        Created: 2025-01-01
        Relevance: 11.98 (exact)
    """
    if not results:
        return (
            f'No memories found matching "{query}". '
            'Try different search terms or add new memories first.'
        )

    blocks = []
    for index, result in enumerate(results, start=1):
        created_at = result.to_dict()["created_at"]
        block = f"Memory {index} (ID: {result.id}):\n{result.content}\nCreated: {created_at}"
        if result.match_type is not MatchType.ALL and result.relevance_score > 0:
            block += f"\nRelevance: {result.relevance_score} ({result.match_type.value})"
        blocks.append(block)

    return f"Found {len(results)} relevant memories (semantic search):\n\n" + "\n---\n\n".join(blocks)
