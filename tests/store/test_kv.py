"""Tests for the sqlite-backed key-value store."""

import sqlite3
from pathlib import Path

import pytest

from ledgerview.errors import StorageError
from ledgerview.store.kv import MemoryKeyValueStore, SqliteKeyValueStore
from ledgerview.store.queries import delete_value, get_value, set_value
from ledgerview.store.schema import database_exists, get_db_path, init_database


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "ledgerview.db"


class TestSchema:
    """Tests for schema initialization and paths."""

    def test_init_creates_file_and_table(self, db_path: Path) -> None:
        """Should create parent directories and the kv_store table."""
        assert not database_exists(db_path)

        init_database(db_path)

        assert database_exists(db_path)
        conn = sqlite3.connect(db_path)
        try:
            tables = [row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")]
        finally:
            conn.close()
        assert "kv_store" in tables

    def test_init_is_repeatable(self, db_path: Path) -> None:
        """Should not fail when the schema already exists."""
        init_database(db_path)
        init_database(db_path)

    def test_db_path_follows_xdg(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should place the store under XDG_DATA_HOME."""
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        assert get_db_path() == tmp_path / "ledgerview" / "ledgerview.db"


class TestQueries:
    """Tests for the query functions."""

    def test_set_get_replace_delete(self, db_path: Path) -> None:
        """Should store, replace and delete values."""
        init_database(db_path)

        assert get_value("k", db_path) is None

        set_value("k", "one", db_path)
        set_value("k", "two", db_path)
        assert get_value("k", db_path) == "two"

        assert delete_value("k", db_path)
        assert not delete_value("k", db_path)
        assert get_value("k", db_path) is None


class TestSqliteKeyValueStore:
    """Tests for SqliteKeyValueStore."""

    def test_values_survive_reopen(self, db_path: Path) -> None:
        """Should read back values written by another instance."""
        SqliteKeyValueStore(db_path).set("budget-tracker-categories", "[]")

        assert SqliteKeyValueStore(db_path).get("budget-tracker-categories") == "[]"

    def test_delete(self, db_path: Path) -> None:
        """Should remove the key."""
        store = SqliteKeyValueStore(db_path)
        store.set("k", "v")
        store.delete("k")

        assert store.get("k") is None

    def test_unopenable_path_raises_storage_error(self, tmp_path: Path) -> None:
        """Should wrap failures to create the store."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with pytest.raises(StorageError):
            SqliteKeyValueStore(blocker / "ledgerview.db")


class TestMemoryKeyValueStore:
    """Tests for MemoryKeyValueStore."""

    def test_get_set_delete(self) -> None:
        """Should behave like a dict of strings."""
        store = MemoryKeyValueStore({"a": "1"})
        store.set("b", "2")
        store.delete("a")
        store.delete("missing")

        assert store.get("a") is None
        assert store.get("b") == "2"
        assert store.data == {"b": "2"}
