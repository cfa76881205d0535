"""
Unit tests for record sources.
"""

from datetime import datetime

import pytest
from memory_search.models import Record
from memory_search.sources import InMemoryRecordSource, RecordSource

pytestmark = pytest.mark.unit


class TestInMemoryRecordSource:
    """Test in-memory source ordering and limits"""

    @pytest.mark.asyncio
    async def test_most_recent_first(self, make_record):
        source = InMemoryRecordSource([
            make_record(1, "a", day=2),
            make_record(2, "b", day=5),
            make_record(3, "c", day=1),
        ])

        records = await source.fetch_recent(10)

        assert [r.id for r in records] == [2, 1, 3]

    @pytest.mark.asyncio
    async def test_limit(self, make_record):
        source = InMemoryRecordSource([make_record(i, "x") for i in range(1, 6)])

        records = await source.fetch_recent(2)

        assert [r.id for r in records] == [5, 4]

    @pytest.mark.asyncio
    async def test_add(self, make_record):
        source = InMemoryRecordSource()
        assert len(source) == 0

        source.add(make_record(1, "x"))

        assert len(source) == 1
        assert [r.id for r in await source.fetch_recent(5)] == [1]

    @pytest.mark.asyncio
    async def test_mixed_timestamps(self):
        """Mixed datetime / string timestamps with offsets sort by time"""
        source = InMemoryRecordSource([
            Record(1, "a", "2025-03-01T12:00:00+02:00"),
            Record(2, "b", datetime(2025, 3, 1, 11, 0)),
            Record(3, "c", "2025-03-01T09:00:00Z"),
        ])

        records = await source.fetch_recent(3)

        assert [r.id for r in records] == [2, 1, 3]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await InMemoryRecordSource().fetch_recent(50) == []

    def test_is_record_source(self):
        assert isinstance(InMemoryRecordSource(), RecordSource)

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            RecordSource()
