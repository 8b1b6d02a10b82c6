"""Budget command for viewing and setting category budgets."""

import sys
from datetime import datetime

from rich.console import Console
from rich.table import Table

from ledgerview.api import LedgerApi
from ledgerview.commands.common import fail, open_api, open_registry
from ledgerview.dates import current_month, month_label
from ledgerview.domain.budget import (
    BudgetSnapshot,
    budget_vs_actual_rows,
    recommend_budgets,
    spending_history,
    summarize_budget,
)
from ledgerview.domain.classifier import STATUS_STYLES, status_label, utilization
from ledgerview.domain.models import CategoryName, Money, Month
from ledgerview.domain.report import format_money, format_percentage
from ledgerview.errors import LedgerViewError, ValidationError
from ledgerview.registry import CategoryRegistry

console = Console()


def parse_money(amount_str: str) -> Money | None:
    """Parse money string to an amount.

    Args:
        amount_str: String containing amount in dollars.

    Returns:
        Money amount, or None if invalid or negative.
    """
    try:
        amount = float(amount_str.replace(",", "").lstrip("$"))
        if amount < 0:
            return None
        return Money(amount)
    except ValueError:
        return None


def parse_budget_assignments(assignments: list[str]) -> dict[CategoryName, Money]:
    """Parse CATEGORY=AMOUNT pairs from the command line.

    Raises:
        ValidationError: If any pair is malformed or has an invalid amount.
    """
    parsed: dict[CategoryName, Money] = {}
    errors: dict[str, str] = {}

    for assignment in assignments:
        category, sep, amount_str = assignment.rpartition("=")
        if not sep or not category.strip():
            errors[assignment] = "Expected CATEGORY=AMOUNT"
            continue
        amount = parse_money(amount_str)
        if amount is None:
            errors[category] = f"Invalid amount '{amount_str}'"
            continue
        parsed[CategoryName(category.strip())] = amount

    if errors:
        raise ValidationError(errors)
    return parsed


def display_categories(registry: CategoryRegistry, snapshot: BudgetSnapshot) -> list[CategoryName]:
    """Expense categories in registry order, followed by any others the snapshot mentions."""
    categories = registry.expense_names()
    known = set(categories)
    for category in [*snapshot.budget, *snapshot.actual_expenses]:
        if category not in known:
            categories.append(category)
            known.add(category)
    return categories


def show_budget_status(snapshot: BudgetSnapshot, registry: CategoryRegistry) -> None:
    """Render budget vs. actual for a snapshot."""
    month_display = month_label(snapshot.month)
    console.print(f"[bold cyan]{month_display} Budget Status[/bold cyan]\n")

    if not snapshot.budget and not snapshot.actual_expenses:
        console.print(f"[yellow]No budget set for {month_display}[/yellow]")
        console.print("[dim]Use 'ledgerview budget --set CATEGORY=AMOUNT' to set one[/dim]")
        return

    summary = summarize_budget(snapshot)

    console.print(f"[bold]Total Budget:[/bold] {format_money(summary.total_budget)}")
    console.print(f"[bold]Total Spent:[/bold]  {format_money(summary.total_spent)}")
    if summary.remaining < 0:
        console.print(f"[bold]Overspent:[/bold]    [red]{format_money(Money(-summary.remaining))}[/red]")
    else:
        console.print(f"[bold]Remaining:[/bold]    [green]{format_money(summary.remaining)}[/green]")
    console.print(f"[bold]Utilization:[/bold]  {format_percentage(summary.utilization)}\n")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Category", style="white")
    table.add_column("Budget", justify="right")
    table.add_column("Actual", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Used", justify="right")
    table.add_column("Variance", justify="right")
    table.add_column("Status")

    for row in budget_vs_actual_rows(display_categories(registry, snapshot), snapshot):
        remaining = Money(row.budgeted - row.actual)
        remaining_display = format_money(remaining)
        if remaining < 0:
            remaining_display = f"[red]{remaining_display}[/red]"

        style = STATUS_STYLES[row.status]
        table.add_row(
            row.category,
            format_money(row.budgeted),
            format_money(row.actual),
            remaining_display,
            format_percentage(utilization(row.budgeted, row.actual)),
            f"{row.variance:+.0f}%",
            f"[{style}]{status_label(row.status)}[/{style}]",
        )

    console.print(table)

    if summary.over_budget_categories:
        console.print(f"\n[red]Over budget:[/red] {', '.join(summary.over_budget_categories)}")
    if summary.under_budget_categories:
        console.print(f"[green]Under budget:[/green] {', '.join(summary.under_budget_categories)}")


def show_budget_history(api: LedgerApi) -> None:
    """Render utilization for each month of budget history."""
    snapshots = api.get_budget_history()
    if not snapshots:
        console.print("[yellow]No budget history yet[/yellow]")
        return

    table = Table(title="Budget History", show_header=True, header_style="bold")
    table.add_column("Month", style="cyan")
    table.add_column("Budget", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Used", justify="right")

    for snapshot in snapshots:
        summary = summarize_budget(snapshot)
        table.add_row(
            month_label(snapshot.month),
            format_money(summary.total_budget),
            format_money(summary.total_spent),
            format_money(summary.remaining),
            format_percentage(summary.utilization),
        )

    console.print(table)


def show_recommendations(api: LedgerApi) -> None:
    """Render budget recommendations derived from spending history."""
    recommendations = recommend_budgets(spending_history(api.get_budget_history()))
    if not recommendations:
        console.print("[yellow]Not enough spending history to recommend budgets[/yellow]")
        return

    console.print("[bold cyan]Recommended budgets[/bold cyan] [dim](average spending + 10%)[/dim]\n")
    for category, amount in recommendations.items():
        console.print(f"  {category:20} {format_money(Money(amount)):>12}")

    console.print("\n[dim]Apply with: ledgerview budget --set CATEGORY=AMOUNT[/dim]")


def set_budgets(api: LedgerApi, assignments: list[str]) -> None:
    """Merge CATEGORY=AMOUNT pairs into the current budget and save it."""
    updates = parse_budget_assignments(assignments)
    current = api.get_current_budget()

    categories = dict(current.budget)
    categories.update(updates)
    api.update_budget(categories)

    for category, amount in updates.items():
        console.print(f"[green]✓ {category} budget set to {format_money(amount)}[/green]")


def budget_command(
    month: str | None = None,
    set_amounts: list[str] | None = None,
    reset: bool = False,
    copy_previous: bool = False,
    recommend: bool = False,
    history: bool = False,
) -> None:
    """Show or change category budgets."""
    api = open_api()

    try:
        if reset:
            api.reset_budget()
            console.print(f"[green]✓ Budget for {month_label(current_month())} reset[/green]")
            return

        if copy_previous:
            api.copy_previous_month_budget()
            console.print("[green]✓ Copied previous month's budget[/green]")
            return

        if set_amounts:
            set_budgets(api, set_amounts)
            return

        if recommend:
            show_recommendations(api)
            return

        if history:
            show_budget_history(api)
            return

        if month:
            try:
                target = datetime.strptime(Month(month), "%Y-%m")
            except ValueError:
                console.print(f"[red]Invalid month format: {month}. Use YYYY-MM[/red]")
                sys.exit(1)
            snapshot = api.get_budget_by_month(target.year, target.month)
        else:
            snapshot = api.get_current_budget()

        show_budget_status(snapshot, open_registry())

    except LedgerViewError as e:
        fail(e)
