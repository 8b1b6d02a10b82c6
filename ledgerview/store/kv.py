"""Key-value store implementations used for local persisted state."""

import sqlite3
from pathlib import Path
from typing import Protocol

from ledgerview.errors import StorageError
from ledgerview.store.queries import delete_value, get_value, set_value
from ledgerview.store.schema import get_db_path, init_database


class KeyValueStore(Protocol):
    """Minimal string key-value store."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class SqliteKeyValueStore:
    """Key-value store backed by the local sqlite database.

    Raises StorageError for any sqlite failure.
    """

    def __init__(self, db_path: Path | None = None) -> None:
        self.db_path = db_path or get_db_path()
        try:
            init_database(self.db_path)
        except (sqlite3.Error, OSError) as e:
            raise StorageError(f"Cannot open store at {self.db_path}: {e}") from e

    def get(self, key: str) -> str | None:
        try:
            return get_value(key, self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read '{key}': {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            set_value(key, value, self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write '{key}': {e}") from e

    def delete(self, key: str) -> None:
        try:
            delete_value(key, self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot delete '{key}': {e}") from e


class MemoryKeyValueStore:
    """Process-local key-value store."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)
