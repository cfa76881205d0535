"""Unit tests for records and scored results"""

from datetime import datetime, timedelta, timezone

import pytest
from memory_search.models import InvalidArgumentError, MatchType, Record, ScoredResult, parse_timestamp

pytestmark = pytest.mark.unit


class TestScoredResult:
    """Test result construction and serialization"""

    def test_from_record(self):
        record = Record(id=7, content="I like cats", created_at="2025-01-07")

        result = ScoredResult.from_record(record, 11.98, MatchType.EXACT)

        assert result.id == 7
        assert result.content == "I like cats"
        assert result.created_at == "2025-01-07"
        assert result.relevance_score == 11.98
        assert result.match_type is MatchType.EXACT

    def test_to_dict(self):
        result = ScoredResult(1, "cats", "2025-01-01", 3.59, MatchType.SEMANTIC)

        assert result.to_dict() == {
            "id": 1,
            "content": "cats",
            "created_at": "2025-01-01",
            "relevanceScore": 3.59,
            "matchType": "semantic",
        }

    def test_to_dict_datetime(self):
        result = ScoredResult(1, "cats", datetime(2025, 1, 1, 10, 30), 1.0, MatchType.ALL)
        assert result.to_dict()["created_at"] == "2025-01-01T10:30:00"

    def test_match_type_values(self):
        assert {m.value for m in MatchType} == {"exact", "partial", "semantic", "fuzzy", "context", "all"}

    def test_record_is_immutable(self):
        record = Record(id=1, content="x", created_at="2025-01-01")
        with pytest.raises(Exception):
            record.content = "y"


class TestTimestamps:
    """Test creation timestamp normalization used for recency ordering"""

    def test_naive_datetime_is_utc(self):
        assert parse_timestamp(datetime(2025, 1, 1, 10)) == datetime(2025, 1, 1, 10, tzinfo=timezone.utc)

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2025, 1, 1, 10, tzinfo=timezone(timedelta(hours=2)))
        assert parse_timestamp(value) == datetime(2025, 1, 1, 8, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text,expected", [
        ("2025-01-01T10:00:00", datetime(2025, 1, 1, 10, tzinfo=timezone.utc)),
        ("2025-01-01T10:00:00Z", datetime(2025, 1, 1, 10, tzinfo=timezone.utc)),
        ("2025-01-01T10:00:00+05:00", datetime(2025, 1, 1, 5, tzinfo=timezone.utc)),
        ("2025-01-01 10:00:00", datetime(2025, 1, 1, 10, tzinfo=timezone.utc)),
        ("2025-01-01", datetime(2025, 1, 1, tzinfo=timezone.utc)),
    ])
    def test_iso_strings(self, text, expected):
        assert parse_timestamp(text) == expected

    def test_record_timestamp_property(self):
        record = Record(1, "x", "2025-01-01T12:00:00+01:00")
        assert record.timestamp == datetime(2025, 1, 1, 11, tzinfo=timezone.utc)
        assert record.created_at == "2025-01-01T12:00:00+01:00"  # raw value kept

    @pytest.mark.parametrize("value", ["yesterday", "", None, 1735689600])
    def test_invalid_created_at_rejected(self, value):
        """Bad timestamps fail when the record is built, not during ranking"""
        with pytest.raises(InvalidArgumentError):
            Record(1, "x", value)
