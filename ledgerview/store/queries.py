"""Key-value store query functions."""

import sqlite3
from pathlib import Path

from ledgerview.store.schema import get_db_path


def _connect(db_path: Path | None = None) -> sqlite3.Connection:
    """Create a database connection with row factory.

    Args:
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Database connection with row_factory configured.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def get_value(key: str, db_path: Path | None = None) -> str | None:
    """Get the value stored under a key.

    Args:
        key: Store key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        Stored text, or None if the key is not set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        cursor.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
        row = cursor.fetchone()
        return row["value"] if row else None


def set_value(key: str, value: str, db_path: Path | None = None) -> None:
    """Store a value under a key, replacing any previous value.

    Args:
        key: Store key.
        value: Text to store.
        db_path: Path to the database file. If None, uses default location.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)", (key, value))
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise


def delete_value(key: str, db_path: Path | None = None) -> bool:
    """Delete a key.

    Args:
        key: Store key.
        db_path: Path to the database file. If None, uses default location.

    Returns:
        True if a value was deleted, False if the key was not set.

    Raises:
        sqlite3.Error: If database operation fails.
    """
    with _connect(db_path) as conn:
        cursor = conn.cursor()
        try:
            cursor.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            deleted = cursor.rowcount > 0
            conn.commit()
            return deleted
        except sqlite3.Error:
            conn.rollback()
            raise
