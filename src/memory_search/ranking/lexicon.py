"""
Static lexical resources: stopword set and synonym table.

Both are module-level immutable constants built once at import time and
shared by every ranking call (safe for any number of concurrent readers).
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple

# Common English words that carry no ranking signal
STOPWORDS: FrozenSet[str] = frozenset([
    'a', 'an', 'and', 'are', 'as', 'at', 'be', 'by', 'for', 'from',
    'has', 'he', 'in', 'is', 'it', 'its', 'of', 'on', 'that', 'the',
    'to', 'was', 'will', 'with', 'this', 'but', 'they', 'have',
    'had', 'what', 'said', 'each', 'which', 'do', 'how', 'their', 'if',
    'up', 'out', 'many', 'then', 'them', 'these', 'so', 'some', 'her',
    'would', 'make', 'like', 'into', 'him', 'time', 'two', 'more',
    'go', 'no', 'way', 'could', 'my', 'than', 'first', 'been', 'call',
    'who', 'oil', 'sit', 'now', 'find', 'down', 'day', 'did', 'get',
    'may', 'new', 'try', 'came', 'show', 'every', 'should', 'thought',
])

# Canonical term -> related terms (order preserved, lookups are by membership)
SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    'preferences': ('settings', 'config', 'options', 'choices'),
    'settings': ('preferences', 'config', 'options', 'configuration'),
    'project': ('work', 'task', 'assignment', 'job'),
    'user': ('person', 'client', 'individual'),
    'likes': ('enjoys', 'prefers', 'loves', 'favors'),
    'dislikes': ('hates', 'avoids', 'rejects', 'opposes'),
    'wants': ('needs', 'requires', 'desires', 'seeks'),
    'important': ('crucial', 'vital', 'essential', 'critical'),
    'problem': ('issue', 'bug', 'error', 'trouble'),
    'solution': ('fix', 'answer', 'resolution', 'remedy'),
    'fast': ('quick', 'rapid', 'speedy', 'swift'),
    'slow': ('sluggish', 'delayed', 'gradual'),
    'good': ('great', 'excellent', 'positive', 'beneficial'),
    'bad': ('poor', 'negative', 'terrible', 'awful'),
})


_GROUPS: Tuple[FrozenSet[str], ...] = tuple(
    frozenset((key,) + related) for key, related in SYNONYMS.items()
)


def synonym_groups(term: str) -> Tuple[FrozenSet[str], ...]:
    """
    Return every key+synonyms group the term belongs to, in table order.

    A term belongs to a group when it is the canonical key or one of its
    synonyms, so lookups work in both directions.

    Examples:
        >>> [sorted(g) for g in synonym_groups("fix")]
        [['answer', 'fix', 'remedy', 'resolution', 'solution']]
        >>> synonym_groups("kubernetes")
        ()
    """
    return tuple(
        group for group in _GROUPS
        if term in group
    )
