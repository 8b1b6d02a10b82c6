"""Shared wiring for commands: API client, registry and error reporting."""

import sys
from pathlib import Path
from typing import Any, NoReturn

from rich.console import Console

from ledgerview.api import LedgerApi, get_token
from ledgerview.config import load_settings
from ledgerview.errors import LedgerViewError, NotFoundError, ValidationError
from ledgerview.registry import CategoryRegistry
from ledgerview.store.kv import SqliteKeyValueStore

console = Console()


def open_api(settings: dict[str, Any] | None = None) -> LedgerApi:
    """Create an API client from settings and the environment token."""
    if settings is None:
        settings = load_settings()
    return LedgerApi(settings["api_url"], token=get_token())


def open_registry(db_path: Path | None = None) -> CategoryRegistry:
    """Create the session's category registry on the local store."""
    return CategoryRegistry(SqliteKeyValueStore(db_path))


def fail(error: LedgerViewError) -> NoReturn:
    """Report an error and exit with status 1."""
    if isinstance(error, ValidationError):
        console.print("[red]Invalid input:[/red]", style="bold")
        for name, message in error.fields.items():
            console.print(f"  {name}: {message}")
    elif isinstance(error, NotFoundError):
        console.print(f"[red]Not found: {error}[/red]", style="bold")
    else:
        console.print(f"[red]Error: {error}[/red]", style="bold")
    sys.exit(1)
