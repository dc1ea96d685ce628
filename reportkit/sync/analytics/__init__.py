"""Aggregation and derived metrics over retrieved data."""

from .aggregation import (
    NO_DATA,
    aggregate,
    aggregate_campaign_stats,
    rate,
    round_half_up,
    row_ratio,
)
from .formatting import NOT_AVAILABLE, display_range, format_rate, rate_sort_value
from .trend import classify_metric_trend, classify_trend

__all__ = [
    "NO_DATA",
    "NOT_AVAILABLE",
    "aggregate",
    "aggregate_campaign_stats",
    "rate",
    "row_ratio",
    "round_half_up",
    "format_rate",
    "rate_sort_value",
    "display_range",
    "classify_trend",
    "classify_metric_trend",
]
