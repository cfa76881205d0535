"""
In-memory record source.

For callers that already hold decrypted records (tests, embedded use).
"""

import logging
from typing import Iterable, List, Optional

from ..models import Record
from .base import RecordSource

logger = logging.getLogger(__name__)


class InMemoryRecordSource(RecordSource):
    """Record source backed by a plain list"""

    def __init__(self, records: Optional[Iterable[Record]] = None):
        self._records: List[Record] = list(records or [])

    def add(self, record: Record) -> None:
        """Append a record"""
        self._records.append(record)

    def __len__(self) -> int:
        return len(self._records)

    async def fetch_recent(self, limit: int) -> List[Record]:
        """Most recent `limit` records, newest first"""
        ordered = sorted(self._records, key=lambda r: r.timestamp, reverse=True)
        logger.debug(f"InMemoryRecordSource: returning {min(limit, len(ordered))} of {len(ordered)} records")
        return ordered[:limit]
