"""CLI entry point for ledgerview."""

from typing import List, Optional

import typer

from ledgerview.commands.admin import init_command
from ledgerview.commands.budget import budget_command
from ledgerview.commands.categories import (
    add_category_command,
    list_categories_command,
    remove_category_command,
    sync_categories_command,
    update_category_command,
)
from ledgerview.commands.report import dashboard_command
from ledgerview.commands.transactions import add_command, delete_command, edit_command, list_command
from ledgerview.config import load_settings
from ledgerview.log import setup_logging

app = typer.Typer(
    name="ledgerview",
    help="Budget and spending dashboard for your budget-tracker account",
    add_completion=False,
)

categories_app = typer.Typer(help="Manage your income and expense categories")
app.add_typer(categories_app, name="categories")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Budget and spending dashboard for your budget-tracker account."""
    setup_logging("DEBUG" if verbose else str(load_settings().get("log_level", "WARNING")))


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Initialize ledgerview configuration and local store."""
    init_command(force)


@app.command()
def dashboard() -> None:
    """Show your income, expenses and top spending categories."""
    dashboard_command()


@app.command()
def budget(
    month: str = typer.Option(None, "--month", help="Show a specific month (YYYY-MM)"),
    set_amounts: Optional[List[str]] = typer.Option(
        None, "--set", help="Set a category budget, e.g. --set Groceries=400 (repeatable)"
    ),
    reset: bool = typer.Option(False, "--reset", help="Clear this month's budget"),
    copy_previous: bool = typer.Option(False, "--copy-previous", help="Copy last month's budget to this month"),
    recommend: bool = typer.Option(False, "--recommend", help="Recommend budgets from your spending history"),
    history: bool = typer.Option(False, "--history", help="Show budget utilization for recent months"),
) -> None:
    """Show your budget vs. actual spending, or change budgets."""
    budget_command(month, set_amounts, reset, copy_previous, recommend, history)


@app.command(name="list")
def list_transactions(
    page: int = typer.Option(1, "--page", "-p", help="Page number"),
    limit: int = typer.Option(None, "--limit", "-n", help="Transactions per page (default from config)"),
    category: str = typer.Option(None, "--category", "-c", help="Only this category"),
    type: str = typer.Option(None, "--type", "-t", help="Only 'income' or 'expense'"),
    since: str = typer.Option(None, "--since", help="From this date"),
    until: str = typer.Option(None, "--until", help="Up to this date"),
    month: str = typer.Option(None, "--month", help="Only this month (YYYY-MM); --since/--until take precedence"),
) -> None:
    """List your transactions."""
    list_command(page, limit, category, type, since, until, month)


@app.command()
def add(
    type: str = typer.Argument(..., help="'income' or 'expense'"),
    category: str = typer.Argument(..., help="Category name"),
    amount: float = typer.Argument(..., help="Amount (positive)"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date (default: today)"),
    description: str = typer.Option(None, "--description", "-m", help="Description"),
) -> None:
    """Add a transaction."""
    add_command(type, category, amount, date, description)


@app.command()
def edit(
    transaction_id: str,
    type: str = typer.Option(None, "--type", "-t", help="'income' or 'expense'"),
    category: str = typer.Option(None, "--category", "-c", help="Category name"),
    amount: float = typer.Option(None, "--amount", "-a", help="Amount"),
    date: str = typer.Option(None, "--date", "-d", help="Transaction date"),
    description: str = typer.Option(None, "--description", "-m", help="Description"),
) -> None:
    """Edit a transaction."""
    edit_command(transaction_id, type, category, amount, date, description)


@app.command()
def delete(
    transaction_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Don't ask for confirmation"),
) -> None:
    """Delete a transaction."""
    delete_command(transaction_id, yes)


@categories_app.command(name="list")
def categories_list(
    type: str = typer.Option(None, "--type", "-t", help="Only 'income' or 'expense'"),
) -> None:
    """List your categories."""
    list_categories_command(type)


@categories_app.command(name="add")
def categories_add(
    name: str,
    type: str = typer.Argument(..., help="'income' or 'expense'"),
    description: str = typer.Option("", "--description", "-m", help="Description"),
) -> None:
    """Add a custom category."""
    add_category_command(name, type, description)


@categories_app.command(name="remove")
def categories_remove(name: str) -> None:
    """Remove a custom category (predefined categories are kept)."""
    remove_category_command(name)


@categories_app.command(name="update")
def categories_update(
    name: str,
    rename: str = typer.Option(None, "--rename", help="New name"),
    type: str = typer.Option(None, "--type", "-t", help="'income' or 'expense'"),
    description: str = typer.Option(None, "--description", "-m", help="Description"),
) -> None:
    """Update a category."""
    update_category_command(name, rename, type, description)


@categories_app.command(name="sync")
def categories_sync() -> None:
    """Replace your local categories with the ones from the API."""
    sync_categories_command()


if __name__ == "__main__":
    app()
