"""
Record sources - supply candidate records to the ranker.

Storage and decryption live behind this interface; the ranking engine never
performs I/O itself.
"""

from .base import RecordSource
from .memory import InMemoryRecordSource

__all__ = [
    'RecordSource',
    'InMemoryRecordSource',
]
