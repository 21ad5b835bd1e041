"""Adapter wrapping the JSON file record store."""

from pathlib import Path
from typing import List

from predictor.config import config_from_env
from predictor.records import MatchRecord
from predictor.store import JsonRecordStore

from ...application.ports.record_store import RecordStorePort


class JsonRecordStoreAdapter(RecordStorePort):
    """Adapter persisting the match log to a JSON file."""

    def __init__(self, path: Path | str | None = None):
        """Initialize with a file path.

        Args:
            path: Record log location. If None, PREDICTOR_STORE_PATH is used.
        """
        self._store = JsonRecordStore(path or config_from_env().store_path)

    def load(self) -> List[MatchRecord]:
        return self._store.load()

    def save(self, records: List[MatchRecord]) -> None:
        self._store.save(records)

    def clear(self) -> None:
        self._store.clear()
