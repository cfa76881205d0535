"""Data model shared by the ranking engine, record sources and the service layer"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Union


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument outside its valid range (e.g. limit)"""


def parse_timestamp(value: Union[datetime, str]) -> datetime:
    """
    Convert a creation timestamp to an aware UTC datetime.

    Accepts datetime objects and ISO 8601 strings (a trailing "Z" and the
    SQLite "YYYY-MM-DD HH:MM:SS" form included). Naive values are taken as UTC.

    Raises:
        InvalidArgumentError: value is neither a datetime nor an ISO 8601 string

    Examples:
        >>> parse_timestamp("2025-01-01T10:00:00+05:00")
        datetime.datetime(2025, 1, 1, 5, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidArgumentError(f"created_at is not an ISO 8601 timestamp: {value!r}") from e
    else:
        raise InvalidArgumentError(f"created_at must be a datetime or ISO 8601 string, got {type(value).__name__}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class MatchType(str, Enum):
    """Why a record matched the query"""
    EXACT = "exact"
    PARTIAL = "partial"
    SEMANTIC = "semantic"
    FUZZY = "fuzzy"
    CONTEXT = "context"
    ALL = "all"  # "ALL" bypass - score is not meaningful


@dataclass(frozen=True)
class Record:
    """Stored memory record (plaintext, already decrypted by the source)"""
    id: int
    content: str
    created_at: Union[datetime, str]  # datetime or ISO 8601 string

    def __post_init__(self):
        parse_timestamp(self.created_at)

    @property
    def timestamp(self) -> datetime:
        """created_at as an aware UTC datetime (used for recency ordering)"""
        return parse_timestamp(self.created_at)


@dataclass(frozen=True)
class ScoredResult:
    """Single ranked result with relevance score and match classification"""
    id: int
    content: str
    created_at: Union[datetime, str]
    relevance_score: float
    match_type: MatchType

    @classmethod
    def from_record(cls, record: Record, relevance_score: float, match_type: MatchType) -> "ScoredResult":
        return cls(
            id=record.id,
            content=record.content,
            created_at=record.created_at,
            relevance_score=relevance_score,
            match_type=match_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the wire shape consumed by the tool layer.

        Keys are camelCase to match what callers already expect:
        id, content, created_at, relevanceScore, matchType
        """
        created_at = self.created_at
        if isinstance(created_at, datetime):
            created_at = created_at.isoformat()

        return {
            "id": self.id,
            "content": self.content,
            "created_at": created_at,
            "relevanceScore": self.relevance_score,
            "matchType": self.match_type.value,
        }
