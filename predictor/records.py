from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class Result(str, Enum):
    """Outcome of one match from the player's point of view."""

    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MatchRecord:
    id: str
    opponent_name: str
    result: Result
    note: str
    timestamp: str  # ISO 8601, UTC


def parse_result(value: Any) -> Result:
    if isinstance(value, Result):
        return value
    try:
        return Result(str(value or "").strip().lower())
    except ValueError:
        return Result.UNKNOWN


def parse_time(ts: str) -> Optional[datetime]:
    if not ts:
        return None
    try:
        dt = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    except (TypeError, ValueError):
        return None
    return as_utc(dt)


def as_utc(dt: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already.
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def iso_z(dt: datetime) -> str:
    return as_utc(dt).astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def record_to_json(record: MatchRecord) -> Dict[str, Any]:
    return {
        "id": record.id,
        "name": record.opponent_name,
        "result": record.result.value,
        "note": record.note,
        "timestamp": record.timestamp,
    }


def record_from_json(entry: Dict[str, Any]) -> Optional[MatchRecord]:
    # Older logs use "name"; accept "opponent_name" as well.
    name = str(entry.get("name") or entry.get("opponent_name") or "").strip()
    if not name:
        return None
    return MatchRecord(
        id=str(entry.get("id") or ""),
        opponent_name=name,
        result=parse_result(entry.get("result")),
        note=str(entry.get("note") or ""),
        timestamp=str(entry.get("timestamp") or ""),
    )


def records_to_json(records: List[MatchRecord]) -> List[Dict[str, Any]]:
    return [record_to_json(r) for r in records]


def records_from_json(entries: List[Any]) -> List[MatchRecord]:
    out: List[MatchRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        record = record_from_json(entry)
        if record is not None:
            out.append(record)
    return out
