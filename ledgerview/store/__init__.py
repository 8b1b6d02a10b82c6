"""Local store layer - provides persistence for client-side state.

This module re-exports the public store API for easy importing.
"""

from ledgerview.store.kv import KeyValueStore, MemoryKeyValueStore, SqliteKeyValueStore
from ledgerview.store.queries import delete_value, get_value, set_value
from ledgerview.store.schema import database_exists, get_db_path, init_database

__all__ = [
    # Schema
    "database_exists",
    "get_db_path",
    "init_database",
    # Queries
    "delete_value",
    "get_value",
    "set_value",
    # Stores
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqliteKeyValueStore",
]
