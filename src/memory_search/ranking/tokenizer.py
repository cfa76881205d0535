"""
Text normalizer for relevance ranking.

Normalization pipeline:
1. Lowercase conversion
2. Replace every character that is not a letter, digit, underscore or
   whitespace with a space
3. Split on whitespace runs
4. Drop tokens of length <= 2 and stopwords
5. Apply suffix-stripping stemming ("settings" stays, "deployment" → "deploy")

Token order is kept for debugging only; scoring uses membership tests.
"""

import re
from typing import List, Tuple

from .lexicon import STOPWORDS
from .stemmer import stem

_PUNCTUATION = re.compile(r'[^\w\s]')
MIN_TOKEN_LENGTH = 3


def _surface_tokens(text) -> List[str]:
    """Lowercased, punctuation-free tokens that survive the length/stopword filter"""
    if not isinstance(text, str) or not text:
        return []

    tokens = _PUNCTUATION.sub(' ', text.lower()).split()

    return [
        t for t in tokens
        if len(t) >= MIN_TOKEN_LENGTH and t not in STOPWORDS
    ]


def normalize(text: str) -> List[str]:
    """
    Normalize text into a list of stemmed terms.

    Args:
        text: Input text (non-string input yields an empty list)

    Returns:
        List of lowercase, stemmed terms without stopwords

    Examples:
        >>> normalize("The user's preferences are stored!")
        ['user', 'preferences', 'stor']

        >>> normalize("I like cats")
        ['cats']

        >>> normalize("   ")
        []
    """
    return [stem(t) for t in _surface_tokens(text)]


def normalize_with_surface(text: str) -> List[Tuple[str, str]]:
    """
    Normalize text, keeping each term's unstemmed form alongside it.

    Phrase-context matching works on raw content, so it needs the word as
    the user typed it (lowercased) rather than the stem.

    Examples:
        >>> normalize_with_surface("Deployment settings")
        [('deployment', 'deploy'), ('settings', 'settings')]
    """
    return [(t, stem(t)) for t in _surface_tokens(text)]
