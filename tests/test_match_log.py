from datetime import datetime, timezone
from itertools import count
from typing import List

from predictor.records import MatchRecord, Result
from src.application.ports.record_store import RecordStorePort
from src.application.use_cases.match_log import MatchLogSession

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


class MemoryStore(RecordStorePort):
    def __init__(self, records: List[MatchRecord] | None = None):
        self.records = list(records or [])
        self.saves = 0
        self.clears = 0

    def load(self) -> List[MatchRecord]:
        return list(self.records)

    def save(self, records: List[MatchRecord]) -> None:
        self.saves += 1
        self.records = list(records)

    def clear(self) -> None:
        self.clears += 1
        self.records = []


def _session(store: MemoryStore) -> MatchLogSession:
    counter = count(1)
    return MatchLogSession(store, clock=lambda: NOW, id_factory=lambda: f"id{next(counter)}")


def test_session_loads_existing_log() -> None:
    existing = [MatchRecord("x", "Alice", Result.WIN, "", "2025-03-01T00:00:00Z")]
    session = _session(MemoryStore(existing))
    assert session.records == existing
    assert session.opponents() == ["Alice"]


def test_add_record_saves_log() -> None:
    store = MemoryStore()
    session = _session(store)
    record = session.add_record("Bob", "loss", "close game")
    assert record.id == "id1"
    assert store.saves == 1
    assert store.records == [record]


def test_blank_name_does_not_save() -> None:
    store = MemoryStore()
    session = _session(store)
    assert session.add_record("  ") is None
    assert store.saves == 0
    assert session.records == []


def test_predict_and_series_do_not_save() -> None:
    store = MemoryStore()
    session = _session(store)
    session.add_record("Alice", Result.WIN)
    session.add_record("Bob", Result.LOSS)
    result = session.run_predict(temperature_control=2)
    assert session.state.temperature_control == 2
    assert {p.name for p in result.predictions} == {"Alice", "Bob"}
    assert [p.cumulative_average for p in session.series("Bob")] == [-1.0]
    assert session.state.selected_opponent == "Bob"
    assert store.saves == 2


def test_predict_on_empty_log() -> None:
    assert _session(MemoryStore()).run_predict() is None


def test_clear_empties_store() -> None:
    store = MemoryStore()
    session = _session(store)
    session.add_record("Alice")
    session.clear()
    assert store.clears == 1
    assert session.records == []
    assert session.state.prediction is None
