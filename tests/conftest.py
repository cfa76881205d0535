"""Pytest configuration shared by all tests"""

import sys
from pathlib import Path

import pytest

# Add src/ to path so tests run without an editable install
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from memory_search.models import Record


@pytest.fixture
def make_record():
    """Factory for records with sequential creation dates"""
    def _make(record_id: int, content: str, day: int = None) -> Record:
        day = record_id if day is None else day
        return Record(id=record_id, content=content, created_at=f"2025-01-{day:02d}T10:00:00")
    return _make
