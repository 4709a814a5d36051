"""Record stores and snapshot loading."""

from asset_tracker.store.base import RecordStore, Snapshot, load_snapshot
from asset_tracker.store.json_file import JsonFileRecordStore
from asset_tracker.store.memory import InMemoryRecordStore
from asset_tracker.store.postgres import PostgresRecordStore

__all__ = [
    "InMemoryRecordStore",
    "JsonFileRecordStore",
    "PostgresRecordStore",
    "RecordStore",
    "Snapshot",
    "load_snapshot",
]
