from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence

from .config import DEFAULT_DECAY_FACTOR
from .records import MatchRecord, Result, parse_time

# Losses only count towards the trend when they sit among the most recent
# records of the whole log.
RECENT_WINDOW = 5


@dataclass
class OpponentAggregate:
    weighted_count: float = 0.0
    weighted_score: float = 0.0
    recent_loss_count: int = 0
    timestamps: List[datetime] = field(default_factory=list)

    @property
    def earliest(self) -> Optional[datetime]:
        return min(self.timestamps) if self.timestamps else None

    def avg_score(self) -> float:
        return self.weighted_score / self.weighted_count if self.weighted_count else 0.0


def age_weight(index: int, decay_factor: float = DEFAULT_DECAY_FACTOR) -> float:
    return decay_factor ** (index / 3)


def aggregate(
    records: Sequence[MatchRecord],
    decay_factor: float = DEFAULT_DECAY_FACTOR,
) -> Dict[str, OpponentAggregate]:
    """Fold a newest-first log into weighted per-opponent statistics."""
    agg: Dict[str, OpponentAggregate] = {}
    for i, r in enumerate(records):
        w = age_weight(i, decay_factor)
        stats = agg.setdefault(r.opponent_name, OpponentAggregate())
        stats.weighted_count += w
        ts = parse_time(r.timestamp)
        if ts is not None:
            stats.timestamps.append(ts)
        if r.result is Result.WIN:
            stats.weighted_score += w
        elif r.result is Result.LOSS:
            stats.weighted_score -= w
            if i < RECENT_WINDOW:
                stats.recent_loss_count += 1
    return agg
