"""Dashboard command for the income and expense overview."""

from rich.console import Console
from rich.table import Table

from ledgerview.commands.common import fail, open_api
from ledgerview.config import load_settings
from ledgerview.domain.models import Money
from ledgerview.domain.report import calculate_histogram_bar_length, format_money
from ledgerview.domain.summary import (
    FinancialSummary,
    category_count,
    expense_ratio,
    income_vs_expenses,
    savings_rate,
    top_expense_categories,
)
from ledgerview.domain.transactions import Transaction
from ledgerview.errors import LedgerViewError

console = Console()

RECENT_TRANSACTIONS = 5


def render_overview(summary: FinancialSummary) -> None:
    """Render totals, ratios and the income vs. expenses split."""
    console.print("[bold cyan]Financial Overview[/bold cyan]\n")

    console.print(f"[bold]Total Income:[/bold]   [green]{format_money(summary.total_income)}[/green]")
    console.print(f"[bold]Total Expenses:[/bold] [red]{format_money(summary.total_expenses)}[/red]")

    balance_style = "green" if summary.balance >= 0 else "red"
    console.print(f"[bold]Balance:[/bold]        [{balance_style}]{format_money(summary.balance)}[/{balance_style}]")

    console.print(
        f"\n[dim]Savings rate: {savings_rate(summary)}%  ·  "
        f"Expenses/income: {expense_ratio(summary)}%  ·  "
        f"{category_count(summary, 'income')} income / "
        f"{category_count(summary, 'expense')} expense categories[/dim]\n"
    )

    series = income_vs_expenses(summary)
    total = sum(amount for _, amount in series)
    for name, amount in series:
        share = amount / total * 100 if total else 0.0
        bar = "█" * calculate_histogram_bar_length(amount, Money(total), 40)
        console.print(f"  {name:10} {format_money(amount):>14} {share:5.1f}% {bar}")


def render_top_expenses(summary: FinancialSummary, bar_width: int = 30) -> None:
    """Render the largest expense categories as a bar chart."""
    top = top_expense_categories(summary)
    if not top:
        return

    console.print("\n[bold red]Top expense categories:[/bold red]\n")
    max_amount = top[0][1]
    for category, amount in top:
        bar = "█" * calculate_histogram_bar_length(amount, max_amount, bar_width)
        console.print(f"  {category:20} {format_money(amount):>12} {bar}")


def render_recent_transactions(transactions: list[Transaction]) -> None:
    if not transactions:
        return

    table = Table(title="Recent Transactions")
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Description", style="white")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        if txn.type == "expense":
            amount_display = f"[red]-{format_money(txn.amount)}[/red]"
        else:
            amount_display = f"[green]+{format_money(txn.amount)}[/green]"
        table.add_row(txn.date.isoformat(), txn.category, txn.description or "", amount_display)

    console.print()
    console.print(table)


def dashboard_command() -> None:
    """Show the financial summary dashboard."""
    settings = load_settings()
    api = open_api(settings)

    try:
        summary = api.get_financial_summary(settings["user_id"] or None)
        recent = api.get_transactions(page=1, limit=RECENT_TRANSACTIONS)
    except LedgerViewError as e:
        fail(e)

    render_overview(summary)
    render_top_expenses(summary)
    render_recent_transactions(recent.transactions)
