"""Date utilities for ledgerview.

Pure functions for date range calculations and formatting.
"""

from datetime import date, datetime, timedelta

from ledgerview.domain.models import Month


def month_range(month: Month) -> tuple[str, str, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month in YYYY-MM format.

    Returns:
        Tuple of (start_date, end_date, label) where:
        - start_date: First day of month (YYYY-MM-DD)
        - end_date: Last day of month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    dt = datetime.strptime(month, "%Y-%m")
    start = dt.strftime("%Y-%m-01")
    next_month = (dt.replace(day=28) + timedelta(days=4)).replace(day=1)
    end = (next_month - timedelta(days=1)).strftime("%Y-%m-%d")
    label = dt.strftime("%B %Y")
    return start, end, label


def current_month(today: date | None = None) -> Month:
    """Get the current month in YYYY-MM format."""
    if today is None:
        today = date.today()
    return Month(today.strftime("%Y-%m"))


def format_date_for_api(value: date) -> str:
    """Format a date the way the API expects it (YYYY-MM-DD)."""
    return value.strftime("%Y-%m-%d")


def parse_api_date(value: str) -> date:
    """Parse an ISO-8601 date or timestamp from the API into a date.

    Args:
        value: String such as "2025-01-15" or "2025-01-15T00:00:00.000Z".

    Returns:
        The calendar date part.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def month_from_iso(value: str) -> Month:
    """Reduce an ISO-8601 date or timestamp to its month.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    return Month(parse_api_date(value).strftime("%Y-%m"))


def month_label(month: Month) -> str:
    """Format a month for display (e.g., "January 2025")."""
    return datetime.strptime(month, "%Y-%m").strftime("%B %Y")
