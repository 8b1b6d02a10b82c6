"""Pure helpers for rendering amounts and bar charts in the terminal."""

from ledgerview.domain.models import Money


def format_money(amount: Money) -> str:
    """Format an amount as dollars, with the sign in front (e.g. "-$1,234.50")."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_percentage(value: float) -> str:
    return f"{value:.0f}%"


def calculate_histogram_bar_length(
    amount: Money,
    max_amount: Money,
    bar_width: int,
) -> int:
    """Calculate histogram bar length.

    Args:
        amount: Amount to display.
        max_amount: Maximum amount in dataset.
        bar_width: Maximum bar width in characters.

    Returns:
        Bar length in characters.
    """
    if max_amount <= 0:
        return 0
    return int((abs(amount) / max_amount) * bar_width)
