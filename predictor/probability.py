from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Mapping, Optional

from .aggregate import OpponentAggregate
from .records import as_utc

RECENCY_HALF_DAYS = 10.0
TREND_SATURATION = 3.0
MIN_TEMPERATURE = 0.1


@dataclass(frozen=True)
class Prediction:
    name: str
    raw_probability: float  # normalized, before temperature scaling
    final_probability: float
    score: float  # adjusted base score, not normalized


@dataclass(frozen=True)
class PredictionResult:
    predictions: List[Prediction]
    picked: Prediction


def _age_days(stats: OpponentAggregate, now: datetime) -> float:
    earliest = stats.earliest
    if earliest is None:
        return 0.0
    return max(0.0, (as_utc(now) - earliest).total_seconds() / 86400.0)


def _recency_score(age_days: float) -> float:
    return 1.0 / (1.0 + age_days / RECENCY_HALF_DAYS)


def _trend_boost(stats: OpponentAggregate) -> float:
    return min(1.0, stats.recent_loss_count / TREND_SATURATION)


def _normalize(values: Dict[str, float]) -> Dict[str, float]:
    total = sum(values.values()) or 1.0
    return {k: v / total for k, v in values.items()}


def temperature(temperature_control: float) -> float:
    return max(MIN_TEMPERATURE, 1.0 + temperature_control / 10.0)


def apply_temperature(probs: Dict[str, float], temperature_control: float) -> Dict[str, float]:
    """Raise each probability to 1/temp and renormalize.

    A control of 0 leaves the distribution untouched.
    """
    temp = temperature(temperature_control)
    scaled = {k: v ** (1.0 / temp) for k, v in probs.items()}
    return _normalize(scaled)


def score_opponents(aggregates: Mapping[str, OpponentAggregate], now: datetime) -> Dict[str, float]:
    if not aggregates:
        return {}
    max_count = max(a.weighted_count for a in aggregates.values())
    scores: Dict[str, float] = {}
    for name, stats in aggregates.items():
        recency = _recency_score(_age_days(stats, now))
        base = (
            0.4 * (stats.weighted_count / max_count)
            + 0.4 * recency
            + 0.2 * (1.0 - stats.avg_score())
        )
        scores[name] = base * (1.0 + 0.5 * _trend_boost(stats))
    return scores


def predict(
    aggregates: Mapping[str, OpponentAggregate],
    now: datetime,
    temperature_control: float = 0.0,
) -> Optional[List[Prediction]]:
    """Rank opponents by the probability of being faced next.

    Returns None when there is nothing to rank. Ties in the final probability
    are ordered by opponent name.
    """
    if not aggregates:
        return None

    scores = score_opponents(aggregates, now)
    probs = _normalize(scores)
    final = apply_temperature(probs, temperature_control)

    predictions = [
        Prediction(
            name=name,
            raw_probability=probs[name],
            final_probability=final[name],
            score=scores[name],
        )
        for name in scores
    ]
    predictions.sort(key=lambda p: (-p.final_probability, p.name))
    return predictions


def predict_result(
    aggregates: Mapping[str, OpponentAggregate],
    now: datetime,
    temperature_control: float = 0.0,
) -> Optional[PredictionResult]:
    predictions = predict(aggregates, now, temperature_control)
    if not predictions:
        return None
    return PredictionResult(predictions=predictions, picked=predictions[0])
