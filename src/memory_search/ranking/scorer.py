"""
Lexical relevance scorer for memory records.

Each query term is tried against the record with five strategies, in order,
and the first one that applies contributes to the score:

    1. exact     - term equals a content term                    +10
    2. partial   - term and a content term contain one another    +5
    3. synonym   - term and a content term share a synonym group  +3
    4. fuzzy     - best Levenshtein similarity > 0.7              +similarity × 2
    5. context   - "<term> is", "the <term>", ... in raw content  +1

Contributions of different query terms add up. Two boosts follow:

    length boost:     score × (1 + max(0, 1 - len(content)/1000) × 0.2)
    multi-term boost: + matched × 0.5 when more than one term matched
                      (added after the length boost)

The final score is rounded to 2 decimals. Match type is classified in a
separate pass (exact → partial → semantic → fuzzy → context).

Note: the multi-term boost uses its own membership test (term equals or is a
substring of a content term, one direction only), which is not the same as
the two-way partial test above. Rankings depend on this, keep them separate.
"""

import math
from typing import List, Optional, Sequence, Tuple

from nltk.metrics.distance import edit_distance

from ..models import MatchType
from .lexicon import synonym_groups
from .tokenizer import normalize

CONTEXT_TEMPLATES: Tuple[str, ...] = (
    '{term} is',
    '{term} are',
    'the {term}',
    'of {term}',
    '{term} that',
    '{term} which',
)


def similarity(a: str, b: str) -> float:
    """
    Normalized Levenshtein similarity: 1 - distance / max(len(a), len(b)).

    Examples:
        >>> similarity("proces", "process")
        0.8571428571428572
        >>> similarity("", "")
        1.0
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - edit_distance(a, b) / max_len


class RelevanceScorer:
    """
    Weighted lexical scorer (exact/partial/synonym/fuzzy/context).

    Stateless: one instance can be shared by any number of concurrent calls.
    """

    def __init__(
        self,
        exact_weight: float = 10,
        partial_weight: float = 5,
        synonym_weight: float = 3,
        fuzzy_multiplier: float = 2,
        fuzzy_threshold: float = 0.7,
        fuzzy_min_length: int = 3,
        context_weight: float = 1,
        length_boost: float = 0.2,
        length_norm: float = 1000,
        multi_term_bonus: float = 0.5,
    ):
        """
        Initialize scorer.

        Args:
            exact_weight: Contribution of an exact term match
            partial_weight: Contribution of a substring match
            synonym_weight: Contribution of a synonym-table match
            fuzzy_multiplier: Fuzzy contribution = similarity × multiplier
            fuzzy_threshold: Similarity must exceed this value
            fuzzy_min_length: Longer of the two terms must exceed this length
            context_weight: Contribution of a phrase-context match
            length_boost: Maximum relative boost for short content (0.2 = 20%)
            length_norm: Content length (chars) at which the boost reaches zero
            multi_term_bonus: Flat bonus per matched term when > 1 term matched
        """
        self.exact_weight = exact_weight
        self.partial_weight = partial_weight
        self.synonym_weight = synonym_weight
        self.fuzzy_multiplier = fuzzy_multiplier
        self.fuzzy_threshold = fuzzy_threshold
        self.fuzzy_min_length = fuzzy_min_length
        self.context_weight = context_weight
        self.length_boost = length_boost
        self.length_norm = length_norm
        self.multi_term_bonus = multi_term_bonus

    def score(
        self,
        query_terms: Sequence[str],
        content: str,
        surface_terms: Optional[Sequence[str]] = None,
    ) -> Tuple[float, MatchType]:
        """
        Compute relevance score and match type of one record.

        Args:
            query_terms: Normalized (stemmed) query terms
            content: Raw record content
            surface_terms: Unstemmed query terms, parallel to query_terms
                Used for phrase-context matching (defaults to query_terms)

        Returns:
            (score, match_type) - score >= 0, rounded to 2 decimals

        Example:
            >>> scorer = RelevanceScorer()
            >>> scorer.score(["cats"], "I like cats")
            (11.98, <MatchType.EXACT: 'exact'>)
        """
        if not isinstance(content, str):
            content = ""
        if surface_terms is None:
            surface_terms = query_terms

        content_terms = normalize(content)
        content_text = content.lower()

        score = 0.0
        for term, surface in zip(query_terms, surface_terms):
            score += self._term_score(term, surface, content_terms, content_text)

        # Shorter content is more focused
        length_factor = max(0.0, 1 - len(content) / self.length_norm)
        score *= 1 + length_factor * self.length_boost

        matched = [
            term for term in query_terms
            if term in content_terms or any(term in c for c in content_terms)
        ]
        if len(matched) > 1:
            score += len(matched) * self.multi_term_bonus

        # Half-up, not banker's rounding
        score = math.floor(score * 100 + 0.5) / 100

        return score, self.match_type(query_terms, content_terms)

    def _term_score(
        self,
        term: str,
        surface: str,
        content_terms: List[str],
        content_text: str,
    ) -> float:
        """Contribution of one query term (first applicable strategy wins)"""
        if term in content_terms:
            return self.exact_weight

        if any(term in c or c in term for c in content_terms):
            return self.partial_weight

        synonym = self.synonym_score(term, content_terms)
        if synonym > 0:
            return synonym

        fuzzy = self.fuzzy_score(term, content_terms)
        if fuzzy > 0:
            return fuzzy

        return self.context_score(surface, content_text)

    def synonym_score(self, term: str, content_terms: Sequence[str]) -> float:
        """Synonym weight if term and any content term share a synonym group"""
        for group in synonym_groups(term):
            if any(c in group for c in content_terms):
                return self.synonym_weight
        return 0.0

    def fuzzy_score(self, term: str, content_terms: Sequence[str]) -> float:
        """Best similarity × multiplier among content terms close enough to term"""
        best = 0.0
        for content_term in content_terms:
            max_len = max(len(term), len(content_term))
            if max_len <= self.fuzzy_min_length:
                continue
            sim = similarity(term, content_term)
            if sim > self.fuzzy_threshold:
                best = max(best, sim * self.fuzzy_multiplier)
        return best

    def context_score(self, term: str, content_text: str) -> float:
        """Context weight if any phrase template around term appears in content"""
        for template in CONTEXT_TEMPLATES:
            if template.format(term=term) in content_text:
                return self.context_weight
        return 0.0

    def match_type(self, query_terms: Sequence[str], content_terms: Sequence[str]) -> MatchType:
        """
        Classify why a record matched.

        exact: every query term is a content term
        partial: at least one is
        semantic: some term has a synonym match
        fuzzy: some term has a fuzzy match
        context: fallback (also for an empty query)
        """
        if query_terms:
            exact = [t for t in query_terms if t in content_terms]
            if len(exact) == len(query_terms):
                return MatchType.EXACT
            if exact:
                return MatchType.PARTIAL

        if any(self.synonym_score(t, content_terms) > 0 for t in query_terms):
            return MatchType.SEMANTIC

        if any(self.fuzzy_score(t, content_terms) > 0 for t in query_terms):
            return MatchType.FUZZY

        return MatchType.CONTEXT
