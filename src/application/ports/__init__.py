"""Application ports (interfaces)."""

from .record_store import RecordStorePort

__all__ = [
    "RecordStorePort",
]
