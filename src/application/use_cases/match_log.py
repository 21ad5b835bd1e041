"""Use case wrapping the match log lifecycle."""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from predictor.config import CHART_SERIES_POINTS, DEFAULT_DECAY_FACTOR
from predictor.probability import PredictionResult
from predictor.records import MatchRecord, Result, now_utc
from predictor.series import PerformancePoint, opponent_names
from predictor.state import (
    AppState,
    IdFactory,
    add_record,
    clear_records,
    performance_series,
    run_predict,
    select_opponent,
    set_temperature,
    uuid_id_factory,
)

from ..ports.record_store import RecordStorePort

logger = logging.getLogger(__name__)


class MatchLogSession:
    """One user's match log with load-on-start and save-on-mutation.

    This orchestrates:
    1. Loading the stored log once, on construction
    2. Applying UI triggers to the application state
    3. Saving the log after every mutation (add, clear)
    """

    def __init__(
        self,
        store: RecordStorePort,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[IdFactory] = None,
        decay_factor: float = DEFAULT_DECAY_FACTOR,
    ):
        self._store = store
        self._clock = clock or now_utc
        self._id_factory = id_factory or uuid_id_factory
        self._decay_factor = decay_factor
        self._state = AppState(records=tuple(store.load()))
        logger.info(f"Loaded {len(self._state.records)} match records")

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def records(self) -> List[MatchRecord]:
        return self._state.record_list

    def opponents(self) -> List[str]:
        return opponent_names(self._state.records)

    def add_record(
        self, name: str, result: Result | str = Result.WIN, note: str = ""
    ) -> Optional[MatchRecord]:
        """Record a match.

        Returns:
            The new record, or None when the name was blank and nothing changed
        """
        updated = add_record(
            self._state, name, result, note, now=self._clock(), id_factory=self._id_factory
        )
        if updated is self._state:
            logger.debug("Ignored record with blank opponent name")
            return None
        self._state = updated
        self._store.save(self._state.record_list)
        return self._state.records[0]

    def set_temperature(self, value: float) -> float:
        self._state = set_temperature(self._state, value)
        return self._state.temperature_control

    def run_predict(self, temperature_control: Optional[float] = None) -> Optional[PredictionResult]:
        if temperature_control is not None:
            self.set_temperature(temperature_control)
        self._state = run_predict(self._state, self._clock(), self._decay_factor)
        return self._state.prediction

    def select_opponent(self, name: Optional[str]) -> None:
        self._state = select_opponent(self._state, name)

    def series(
        self, name: Optional[str] = None, window_size: int = CHART_SERIES_POINTS
    ) -> List[PerformancePoint]:
        if name is not None:
            self.select_opponent(name)
        return performance_series(self._state, window_size)

    def clear(self) -> None:
        self._state = clear_records(self._state)
        self._store.clear()
