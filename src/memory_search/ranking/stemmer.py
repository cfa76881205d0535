"""
Suffix-stripping stemmer.

Deliberately simple: strips the first matching suffix from a fixed list,
no linguistic rules and no repeated passes. Matching relies on these exact
truncations, so results must stay stable across releases.

Examples:
- "running" → "runn"
- "deployment" → "deploy"
- "quickly" → "quick"
- "cats" → "cats" (no rule)
"""

from typing import Tuple

# Order matters: first match wins
SUFFIXES: Tuple[str, ...] = ('ing', 'ed', 'er', 'est', 'ly', 'tion', 'ness', 'ment')


def stem(word: str) -> str:
    """
    Strip the first matching suffix from a lowercase word.

    A suffix is stripped only when at least three characters of the word
    would remain (len(word) > len(suffix) + 2).

    Examples:
        >>> stem("searching")
        'search'
        >>> stem("red")
        'red'
        >>> stem("information")
        'informa'
    """
    for suffix in SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[:-len(suffix)]
    return word
