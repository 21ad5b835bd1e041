"""Application state and the pure functions that update it.

Every function takes an ``AppState`` and returns a new one; nothing here
touches storage. Clock and id generation are passed in so record creation
stays reproducible.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from .aggregate import aggregate
from .config import CHART_SERIES_POINTS, DEFAULT_DECAY_FACTOR, TEMPERATURE_BOUNDS
from .probability import PredictionResult, predict_result
from .records import MatchRecord, Result, iso_z, parse_result
from .series import PerformancePoint, build_series, opponent_history

IdFactory = Callable[[], str]


def uuid_id_factory() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class AppState:
    records: Tuple[MatchRecord, ...] = ()
    prediction: Optional[PredictionResult] = None
    selected_opponent: Optional[str] = None
    temperature_control: float = 0.0

    @property
    def record_list(self) -> List[MatchRecord]:
        return list(self.records)


def add_record(
    state: AppState,
    name: str,
    result: Result | str = Result.WIN,
    note: str = "",
    *,
    now: datetime,
    id_factory: IdFactory = uuid_id_factory,
) -> AppState:
    clean = (name or "").strip()
    if not clean:
        return state
    record = MatchRecord(
        id=id_factory(),
        opponent_name=clean,
        result=parse_result(result),
        note=note or "",
        timestamp=iso_z(now),
    )
    return replace(state, records=(record,) + state.records)


def run_predict(
    state: AppState,
    now: datetime,
    decay_factor: float = DEFAULT_DECAY_FACTOR,
) -> AppState:
    aggregates = aggregate(state.records, decay_factor)
    prediction = predict_result(aggregates, now, state.temperature_control)
    return replace(state, prediction=prediction)


def select_opponent(state: AppState, name: Optional[str]) -> AppState:
    return replace(state, selected_opponent=name)


def set_temperature(state: AppState, value: float) -> AppState:
    low, high = TEMPERATURE_BOUNDS
    return replace(state, temperature_control=min(high, max(low, float(value))))


def clear_records(state: AppState) -> AppState:
    return replace(state, records=(), prediction=None, selected_opponent=None)


def performance_series(
    state: AppState,
    window_size: int = CHART_SERIES_POINTS,
) -> List[PerformancePoint]:
    if not state.selected_opponent:
        return []
    history = opponent_history(state.records, state.selected_opponent)
    return build_series(history, window_size)
