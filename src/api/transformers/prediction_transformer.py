"""Transform core results to the frontend's camelCase format."""

from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from predictor.probability import PredictionResult
from predictor.records import MatchRecord
from predictor.series import PerformancePoint


def _to_camel_case(snake_str: str) -> str:
    """Convert snake_case to camelCase."""
    components = snake_str.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


def _camelize(obj: Any) -> Any:
    if is_dataclass(obj):
        obj = asdict(obj)
    if isinstance(obj, dict):
        return {_to_camel_case(str(k)): _camelize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_camelize(v) for v in obj]
    if isinstance(obj, Enum):
        return obj.value
    return obj


def transform_record(record: MatchRecord) -> Dict[str, Any]:
    return _camelize(record)


def transform_prediction(
    result: Optional[PredictionResult], temperature_control: float
) -> Dict[str, Any]:
    """Build the prediction payload.

    Probabilities are also given as percentages rounded to two decimals,
    the way the table shows them.
    """
    if result is None:
        return {"temperatureControl": temperature_control, "picked": None, "predictions": []}
    predictions = []
    for rank, p in enumerate(result.predictions, start=1):
        item = _camelize(p)
        item["rank"] = rank
        item["percentage"] = round(p.final_probability * 100, 2)
        predictions.append(item)
    return {
        "temperatureControl": temperature_control,
        "picked": predictions[0],
        "predictions": predictions,
    }


def transform_series(name: str, series: List[PerformancePoint]) -> Dict[str, Any]:
    return {
        "opponentName": name,
        "yDomain": [-1, 1],
        "points": _camelize(series),
    }
