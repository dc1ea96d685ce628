"""Two-half trend classification."""

from __future__ import annotations

from collections.abc import Sequence

from ..config import TREND_THRESHOLD_PERCENT
from ..core.enums import TrendDirection
from ..models import DailyMetric


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def classify_trend(
    values: Sequence[float],
    threshold_percent: float = TREND_THRESHOLD_PERCENT,
) -> TrendDirection:
    """Classify a time series by comparing the means of its two halves.

    An odd-length series gives its extra element to the second half. A zero
    first-half mean is "up" if the second half is positive, else "stable".
    Otherwise a change beyond ``threshold_percent`` in either direction is
    "up"/"down". Fewer than two points are always "stable".
    """
    if len(values) < 2:
        return TrendDirection.STABLE

    mid = len(values) // 2
    first = _mean(values[:mid])
    second = _mean(values[mid:])

    if first == 0:
        return TrendDirection.UP if second > 0 else TrendDirection.STABLE

    change = (second - first) / first * 100
    if change > threshold_percent:
        return TrendDirection.UP
    if change < -threshold_percent:
        return TrendDirection.DOWN
    return TrendDirection.STABLE


def classify_metric_trend(
    metrics: Sequence[DailyMetric],
    field: str = "closed",
    threshold_percent: float = TREND_THRESHOLD_PERCENT,
) -> TrendDirection:
    """Classify the trend of one DailyMetric field (closed deals by default)."""
    return classify_trend([getattr(m, field) for m in metrics], threshold_percent)
