from __future__ import annotations

from typing import List, Optional

from .probability import PredictionResult
from .records import MatchRecord
from .series import PerformancePoint


def render_prediction(result: Optional[PredictionResult]) -> str:
    if result is None:
        return "No records yet. Add matches before running a prediction."

    lines = []
    lines.append("NEXT OPPONENT PREDICTION")
    lines.append(
        f"Top pick: {result.picked.name} ({result.picked.final_probability * 100:.2f}%)"
    )
    lines.append("")
    width = max(len(p.name) for p in result.predictions)
    for p in result.predictions:
        lines.append(f"- {p.name.ljust(width)}  {p.final_probability * 100:6.2f}%")
    return "\n".join(lines)


def render_series(name: str, series: List[PerformancePoint]) -> str:
    if not series:
        return f"No data for {name}."

    lines = []
    lines.append(f"PERFORMANCE: {name}")
    lines.append("Cumulative average of results (win=+1, draw=0, loss=-1)")
    for pt in series:
        lines.append(f"{pt.time_label}  {pt.cumulative_average:+.3f}  ({pt.raw_value:+d})")
    return "\n".join(lines)


def render_records(records: List[MatchRecord]) -> str:
    if not records:
        return "Record log is empty."
    lines = []
    for r in records:
        line = f"{r.timestamp}  {r.opponent_name}  {r.result.value}"
        if r.note:
            line += f"  | {r.note}"
        lines.append(line)
    return "\n".join(lines)
