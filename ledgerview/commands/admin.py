"""Admin command for initializing configuration and the local store."""

import sqlite3
import sys
from pathlib import Path

from rich.console import Console

from ledgerview.config import create_default_config, get_config_path
from ledgerview.store.schema import database_exists, get_db_path, init_database

console = Console()


def run_full_init(db_path: Path, config_path: Path) -> None:
    """Initialize new local store and config."""
    console.print(f"[cyan]Initializing local store at {db_path}...[/cyan]")
    init_database(db_path)
    console.print("[green]✓[/green] Local store initialized")

    console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
    create_default_config(config_path)
    console.print("[green]✓[/green] Config file created (permissions: 600)")

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Store: {db_path}[/dim]")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print("[dim]Set LEDGERVIEW_TOKEN in your environment to authenticate with the API[/dim]")


def init_command(force: bool = False) -> None:
    """Initialize ledgerview local store and configuration."""
    db_path = get_db_path()
    config_path = get_config_path()

    db_exists = database_exists(db_path)
    config_exists = config_path.exists()

    try:
        # Guard: refuse to overwrite without force flag
        if not force and (db_exists or config_exists):
            console.print("[red]Initialization failed:[/red]", style="bold")
            if db_exists:
                console.print(f"  Store already exists: {db_path}")
            if config_exists:
                console.print(f"  Config already exists: {config_path}")
            console.print("\n[yellow]Use 'ledgerview init --force' to overwrite[/yellow]")
            sys.exit(1)

        run_full_init(db_path, config_path)

    except sqlite3.Error as e:
        console.print(f"[red]Database error: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)
