"""Application use cases."""

from .match_log import MatchLogSession

__all__ = [
    "MatchLogSession",
]
