"""
Unit tests for static lexical resources.
"""

import pytest
from memory_search.ranking.lexicon import STOPWORDS, SYNONYMS, synonym_groups

pytestmark = pytest.mark.unit


class TestLexicon:
    """Test stopword set and synonym table lookups"""

    def test_common_stopwords(self):
        """Typical low-information words are stopwords"""
        for word in ("the", "is", "which", "like", "my"):
            assert word in STOPWORDS

    def test_synonym_lookup_by_key(self):
        """Canonical key finds its own group"""
        groups = synonym_groups("solution")
        assert len(groups) == 1
        assert groups[0] == {'solution', 'fix', 'answer', 'resolution', 'remedy'}

    def test_synonym_lookup_by_value(self):
        """Synonym value finds the group it belongs to"""
        groups = synonym_groups("fix")
        assert len(groups) == 1
        assert "solution" in groups[0]

    def test_term_in_several_groups(self):
        """A term listed under two keys belongs to both groups"""
        groups = synonym_groups("config")
        assert len(groups) == 2
        assert any("preferences" in g for g in groups)
        assert any("configuration" in g for g in groups)

    def test_unknown_term(self):
        """Terms outside the table have no groups"""
        assert synonym_groups("kubernetes") == ()

    def test_tables_are_immutable(self):
        """Shared data cannot be modified at runtime"""
        with pytest.raises(TypeError):
            SYNONYMS["new"] = ("old",)
        with pytest.raises(AttributeError):
            STOPWORDS.add("cats")
