"""
Abstract base class for record sources.

All sources must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod
from typing import List

from ..models import Record


class RecordSource(ABC):
    """
    Abstract base class for record sources.

    Implementations own storage, decryption and any retry policy. Errors they
    raise are propagated to the caller unchanged.
    """

    @abstractmethod
    async def fetch_recent(self, limit: int) -> List[Record]:
        """
        Fetch the most recent records.

        Args:
            limit: Maximum number of records to return

        Returns:
            List of plaintext records, ordered by created_at (descending)
        """
        pass

    async def close(self):
        """Optional cleanup (close connections, etc.)"""
        pass
