"""JSON file backed record log."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List

from .records import MatchRecord, records_from_json, records_to_json

logger = logging.getLogger(__name__)


class JsonRecordStore:
    """Persists the match log as a JSON array, newest record first.

    Loading never fails: a missing file, unreadable JSON or a payload that is
    not a list all come back as an empty log.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> List[MatchRecord]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read record log {self.path}: {e}")
            return []
        if isinstance(raw, dict):
            raw = raw.get("records")
        if not isinstance(raw, list):
            logger.warning(f"Record log {self.path} is not a list; starting empty")
            return []
        records = records_from_json(raw)
        if len(records) != len(raw):
            logger.info(f"Skipped {len(raw) - len(records)} malformed entries in {self.path}")
        return records

    def save(self, records: List[MatchRecord]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".records-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(records_to_json(records), f, indent=2)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
