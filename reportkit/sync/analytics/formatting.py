"""Display helpers for rates and page ranges."""

from __future__ import annotations

from .aggregation import row_ratio

NOT_AVAILABLE = "N/A"


def format_rate(numerator: float, denominator: float) -> str:
    """Format a row ratio as ``"32.5%"``, or ``"N/A"`` when there is no data."""
    value = row_ratio(numerator, denominator)
    if value is None:
        return NOT_AVAILABLE
    return f"{value:.1f}%"


def rate_sort_value(numerator: float, denominator: float) -> float:
    """Sortable rate; rows with no data get -1 so they sort to the bottom."""
    value = row_ratio(numerator, denominator)
    return -1.0 if value is None else value


def display_range(page: int, limit: int, total: int) -> tuple[int, int]:
    """First and last (1-based) item numbers shown on ``page``.

    Examples:
        >>> display_range(3, 20, 50)
        (41, 50)
        >>> display_range(1, 20, 0)
        (0, 0)
    """
    if total == 0:
        return (0, 0)
    start = (page - 1) * limit + 1
    end = min(page * limit, total)
    return (start, end)
