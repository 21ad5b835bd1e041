"""Infrastructure adapters."""

from .json_record_store_adapter import JsonRecordStoreAdapter

__all__ = [
    "JsonRecordStoreAdapter",
]
