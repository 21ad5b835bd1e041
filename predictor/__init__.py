"""Opponent predictor package."""

__all__ = [
    "config",
    "records",
    "store",
    "aggregate",
    "probability",
    "series",
    "state",
    "render",
    "chart",
]
