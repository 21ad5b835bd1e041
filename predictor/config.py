from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


DEFAULT_DECAY_FACTOR = 0.95

DEFAULT_SERIES_POINTS = 20
CHART_SERIES_POINTS = 30

TEMPERATURE_BOUNDS: Tuple[float, float] = (-5.0, 5.0)

DEFAULT_STORE_PATH = ".cache/predictor/records.json"


@dataclass(frozen=True)
class PredictorConfig:
    store_path: Path
    decay_factor: float
    series_points: int


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, default))
    except ValueError:
        return default


def _decay_env(name: str, default: float) -> float:
    value = _float_env(name, default)
    # Weights must stay positive and non-increasing with age.
    if not 0.0 < value <= 1.0:
        return default
    return value


def config_from_env() -> PredictorConfig:
    store_path = Path(os.environ.get("PREDICTOR_STORE_PATH", DEFAULT_STORE_PATH))
    return PredictorConfig(
        store_path=store_path,
        decay_factor=_decay_env("PREDICTOR_DECAY_FACTOR", DEFAULT_DECAY_FACTOR),
        series_points=_int_env("PREDICTOR_SERIES_POINTS", CHART_SERIES_POINTS),
    )
