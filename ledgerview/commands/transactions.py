"""Transaction commands (list, add, edit, delete)."""

import sys
from datetime import date
from typing import Any

import pandas as pd
import typer
from rich.console import Console
from rich.table import Table

from ledgerview.commands.common import fail, open_api, open_registry
from ledgerview.config import load_settings
from ledgerview.dates import format_date_for_api, month_range
from ledgerview.domain.models import CategoryName, Money, Month
from ledgerview.domain.report import format_money
from ledgerview.domain.summary import summarize_transactions
from ledgerview.domain.transactions import (
    Transaction,
    build_filters,
    page_numbers,
    validate_changes,
    validate_transaction,
)
from ledgerview.errors import LedgerViewError

console = Console()


def normalize_date(value: str) -> date:
    """Parse a user-entered date (YYYY-MM-DD, DD/MM/YYYY, ...).

    Exits with an error message when the date cannot be parsed.
    """
    try:
        return pd.to_datetime(value, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        console.print(f"[red]Invalid date format: {e}[/red]")
        console.print("[dim]Accepted formats: YYYY-MM-DD, DD/MM/YYYY, DD-MM-YYYY, etc.[/dim]")
        sys.exit(1)


def format_signed(txn: Transaction) -> str:
    if txn.type == "expense":
        return f"[red]-{format_money(txn.amount)}[/red]"
    return f"[green]+{format_money(txn.amount)}[/green]"


def warn_unknown_category(category: str) -> None:
    """Warn when a category is not in the local registry (it is still accepted)."""
    registry = open_registry()
    if registry.get(category) is None:
        console.print(f"[yellow]Category '{category}' is not in your category list[/yellow]")


def list_command(
    page: int = 1,
    limit: int | None = None,
    category: str | None = None,
    type: str | None = None,
    since: str | None = None,
    until: str | None = None,
    month: str | None = None,
) -> None:
    """List a page of transactions."""
    start_date = format_date_for_api(normalize_date(since)) if since else None
    end_date = format_date_for_api(normalize_date(until)) if until else None

    if month:
        try:
            month_start, month_end, _ = month_range(Month(month))
        except ValueError:
            console.print(f"[red]Invalid month format: {month}. Use YYYY-MM[/red]")
            sys.exit(1)
        start_date = start_date or month_start
        end_date = end_date or month_end

    settings = load_settings()
    api = open_api(settings)
    filters = build_filters(category, type, start_date, end_date)

    try:
        result = api.get_transactions(page, limit or settings["page_size"], filters)
    except LedgerViewError as e:
        fail(e)

    if not result.transactions:
        console.print("[yellow]No transactions found[/yellow]")
        return

    table = Table(title=f"Transactions (page {result.current_page} of {result.total_pages}, {result.total} total)")
    table.add_column("ID", style="dim")
    table.add_column("Date", style="cyan")
    table.add_column("Type")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in result.transactions:
        table.add_row(
            txn.id or "-",
            txn.date.isoformat(),
            txn.type,
            txn.category,
            txn.description or "[dim]-[/dim]",
            format_signed(txn),
        )

    console.print(table)

    totals = summarize_transactions(result.transactions)
    console.print(
        f"\n[bold]This page:[/bold] income [green]{format_money(totals.total_income)}[/green]"
        f"  expenses [red]{format_money(totals.total_expenses)}[/red]"
    )

    pages = page_numbers(result.current_page, result.total_pages)
    if len(pages) > 1:
        labels = [f"[bold]{p}[/bold]" if p == result.current_page else str(p) for p in pages]
        console.print(f"[dim]Pages:[/dim] {' '.join(labels)}  [dim](use --page)[/dim]")


def add_command(
    type: str,
    category: str,
    amount: float,
    txn_date: str | None = None,
    description: str | None = None,
) -> None:
    """Add a transaction."""
    api = open_api()

    try:
        validate_transaction(type, category, amount)
        warn_unknown_category(category)

        transaction = Transaction(
            type=type,  # type: ignore[arg-type]
            category=CategoryName(category),
            amount=Money(amount),
            date=normalize_date(txn_date) if txn_date else date.today(),
            description=description,
        )
        created = api.add_transaction(transaction)
    except LedgerViewError as e:
        fail(e)

    console.print("[green]✓[/green] Transaction added:")
    console.print(f"  ID: {created.id or '-'}")
    console.print(f"  Date: {created.date.isoformat()}")
    console.print(f"  Category: {created.category} ({created.type})")
    console.print(f"  Amount: {format_money(created.amount)}")
    if created.description:
        console.print(f"  Description: {created.description}")


def edit_command(
    transaction_id: str,
    type: str | None = None,
    category: str | None = None,
    amount: float | None = None,
    txn_date: str | None = None,
    description: str | None = None,
) -> None:
    """Update fields of an existing transaction."""
    changes: dict[str, Any] = {}
    if type is not None:
        changes["type"] = type
    if category is not None:
        changes["category"] = category
    if amount is not None:
        changes["amount"] = amount
    if txn_date is not None:
        changes["date"] = format_date_for_api(normalize_date(txn_date))
    if description is not None:
        changes["description"] = description

    if not changes:
        console.print("[yellow]Nothing to change[/yellow]")
        return

    api = open_api()

    try:
        validate_changes(changes)
        updated = api.update_transaction(transaction_id, changes)
    except LedgerViewError as e:
        fail(e)

    console.print(f"[green]✓[/green] Updated transaction {transaction_id}:")
    console.print(f"  {updated.date.isoformat()}  {updated.category}  {format_signed(updated)}")


def delete_command(transaction_id: str, yes: bool = False) -> None:
    """Delete a transaction after confirmation."""
    if not yes and not typer.confirm(f"Delete transaction {transaction_id}?", default=False):
        console.print("[dim]Cancelled[/dim]")
        return

    api = open_api()

    try:
        api.delete_transaction(transaction_id)
    except LedgerViewError as e:
        fail(e)

    console.print(f"[green]✓[/green] Deleted transaction {transaction_id}")
