import math
from datetime import datetime, timedelta, timezone

import pytest

from predictor.aggregate import OpponentAggregate, aggregate
from predictor.probability import (
    _trend_boost,
    apply_temperature,
    predict,
    predict_result,
    score_opponents,
    temperature,
)
from predictor.records import MatchRecord, Result

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


def _agg(count: float, score: float, days_ago: float, recent_losses: int = 0) -> OpponentAggregate:
    return OpponentAggregate(
        weighted_count=count,
        weighted_score=score,
        recent_loss_count=recent_losses,
        timestamps=[NOW - timedelta(days=days_ago)],
    )


def _entropy(values) -> float:
    return -sum(p * math.log(p) for p in values if p > 0)


def _sample() -> dict:
    return {
        "Alice": _agg(1.0, 1.0, 0),
        "Bob": _agg(1.0, -1.0, 10),
        "Cara": _agg(2.5, 0.3, 3, recent_losses=2),
    }


def test_empty_aggregates_give_no_result() -> None:
    assert predict({}, NOW) is None
    assert predict_result({}, NOW) is None


def test_base_scores_and_ranking() -> None:
    aggs = {"Alice": _agg(1.0, 1.0, 0), "Bob": _agg(1.0, -1.0, 10)}
    preds = predict(aggs, NOW)
    # Alice: 0.4 + 0.4 * 1.0 + 0.2 * 0 = 0.8, Bob: 0.4 + 0.4 * 0.5 + 0.2 * 2 = 1.0
    assert [p.name for p in preds] == ["Bob", "Alice"]
    assert preds[0].score == pytest.approx(1.0)
    assert preds[1].score == pytest.approx(0.8)
    assert preds[0].raw_probability == pytest.approx(1.0 / 1.8)


@pytest.mark.parametrize("control", [-5, -2.5, -1, 0, 0.5, 3, 5])
def test_final_probabilities_sum_to_one(control: float) -> None:
    preds = predict(_sample(), NOW, control)
    assert abs(sum(p.final_probability for p in preds) - 1.0) <= 1e-9
    assert all(p.final_probability >= 0 for p in preds)


def test_zero_temperature_control_is_identity() -> None:
    for p in predict(_sample(), NOW, 0):
        assert p.final_probability == pytest.approx(p.raw_probability, abs=1e-12)


def test_temperature_exponent() -> None:
    aggs = {"Alice": _agg(1.0, 1.0, 0), "Bob": _agg(1.0, -1.0, 10)}
    preds = {p.name: p for p in predict(aggs, NOW, 10)}
    pa, pb = preds["Alice"].raw_probability, preds["Bob"].raw_probability
    expected = math.sqrt(pb) / (math.sqrt(pa) + math.sqrt(pb))
    assert preds["Bob"].final_probability == pytest.approx(expected)


def test_temperature_direction_changes_entropy() -> None:
    base = _entropy(p.final_probability for p in predict(_sample(), NOW, 0))
    hot = _entropy(p.final_probability for p in predict(_sample(), NOW, 5))
    cold = _entropy(p.final_probability for p in predict(_sample(), NOW, -5))
    assert hot > base > cold


def test_temperature_floor() -> None:
    assert temperature(0) == 1.0
    assert temperature(-50) == 0.1
    probs = apply_temperature({"a": 0.7, "b": 0.3}, -50)
    assert sum(probs.values()) == pytest.approx(1.0)
    assert probs["a"] > 0.99


def test_prediction_is_deterministic() -> None:
    assert predict(_sample(), NOW, -3) == predict(_sample(), NOW, -3)


def test_ties_ordered_by_name() -> None:
    aggs = {"Zed": _agg(1.0, 0.0, 1), "Ahri": _agg(1.0, 0.0, 1)}
    preds = predict(aggs, NOW)
    assert [p.name for p in preds] == ["Ahri", "Zed"]
    assert preds[0].final_probability == pytest.approx(0.5)


def test_future_timestamps_count_as_today() -> None:
    aggs = {"Alice": _agg(1.0, 0.0, -30), "Bob": _agg(1.0, 0.0, 0)}
    preds = predict(aggs, NOW)
    assert preds[0].final_probability == pytest.approx(0.5)


def test_missing_timestamps_count_as_today() -> None:
    aggs = {
        "Alice": OpponentAggregate(weighted_count=1.0, weighted_score=0.0),
        "Bob": _agg(1.0, 0.0, 0),
    }
    scores = score_opponents(aggs, NOW)
    assert scores["Alice"] == pytest.approx(scores["Bob"])


def test_recent_losses_boost_score() -> None:
    plain = score_opponents({"A": _agg(1.0, 0.0, 2)}, NOW)["A"]
    boosted = score_opponents({"A": _agg(1.0, 0.0, 2, recent_losses=3)}, NOW)["A"]
    assert boosted == pytest.approx(plain * 1.5)


def test_trend_boost_saturates_at_three_recent_losses() -> None:
    records = [
        MatchRecord(str(i), "Dan", Result.LOSS, "", "2025-03-09T12:00:00Z") for i in range(3)
    ]
    records += [
        MatchRecord("3", "Eve", Result.WIN, "", "2025-03-09T12:00:00Z"),
        MatchRecord("4", "Eve", Result.WIN, "", "2025-03-09T12:00:00Z"),
        MatchRecord("5", "Dan", Result.LOSS, "", "2025-03-09T12:00:00Z"),
    ]
    stats = aggregate(records)["Dan"]
    assert _trend_boost(stats) == 1.0
    assert _trend_boost(_agg(1.0, -1.0, 0, recent_losses=5)) == 1.0
    assert _trend_boost(_agg(1.0, -1.0, 0, recent_losses=1)) == pytest.approx(1 / 3)


def test_predict_result_picks_top() -> None:
    result = predict_result(_sample(), NOW)
    assert result.picked == result.predictions[0]


def test_naive_now_is_treated_as_utc() -> None:
    naive = NOW.replace(tzinfo=None)
    assert predict(_sample(), naive) == predict(_sample(), NOW)
