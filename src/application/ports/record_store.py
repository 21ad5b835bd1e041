"""Port (interface) for the persisted match log."""

from abc import ABC, abstractmethod
from typing import List

from predictor.records import MatchRecord


class RecordStorePort(ABC):
    """Port for loading and saving the newest-first record log."""

    @abstractmethod
    def load(self) -> List[MatchRecord]:
        """Load the record log.

        Returns:
            Records newest first; an empty list when nothing usable is stored
        """
        ...

    @abstractmethod
    def save(self, records: List[MatchRecord]) -> None:
        """Replace the stored log with ``records``."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored record."""
        ...
