from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from .config import DEFAULT_SERIES_POINTS
from .records import MatchRecord, Result, parse_time

_RESULT_VALUES: Dict[Result, int] = {Result.WIN: 1, Result.LOSS: -1}


@dataclass(frozen=True)
class HistoryEntry:
    timestamp: str
    result: Result


@dataclass(frozen=True)
class PerformancePoint:
    time_label: str
    cumulative_average: float
    raw_value: int


def result_value(result: Result) -> int:
    return _RESULT_VALUES.get(result, 0)


def _time_label(ts: str) -> str:
    dt = parse_time(ts)
    return dt.date().isoformat() if dt else ts


def opponent_names(records: Sequence[MatchRecord]) -> List[str]:
    return list(dict.fromkeys(r.opponent_name for r in records))


def opponent_history(records: Sequence[MatchRecord], name: str) -> List[HistoryEntry]:
    """Oldest-first sub-history of one opponent from a newest-first log."""
    return [
        HistoryEntry(timestamp=r.timestamp, result=r.result)
        for r in reversed(records)
        if r.opponent_name == name
    ]


def build_series(
    history: Sequence[HistoryEntry],
    window_size: int = DEFAULT_SERIES_POINTS,
) -> List[PerformancePoint]:
    """Cumulative moving average of results, keeping the last window_size points."""
    if window_size <= 0:
        return []
    series: List[PerformancePoint] = []
    cum = 0
    for i, entry in enumerate(history):
        value = result_value(entry.result)
        cum += value
        series.append(
            PerformancePoint(
                time_label=_time_label(entry.timestamp),
                cumulative_average=round(cum / (i + 1), 3),
                raw_value=value,
            )
        )
    return series[-window_size:]
