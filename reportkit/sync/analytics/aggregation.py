"""Rate rollups with divide-by-zero guards.

Rates are percentages rounded half-up to one decimal. An aggregate rate over
a zero denominator is 0; a single row's ratio over a zero denominator is
``NO_DATA`` so displays can render "N/A" instead of a misleading 0%.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..models import Aggregate, CampaignAggregate, CampaignStats

NO_DATA = None

_CAMPAIGN_FIELDS = ("delivered", "opened", "clicked", "unique_opens", "unique_clicks")


def round_half_up(value: float, places: int = 1) -> float:
    """Round ``value`` half-up (away from zero on ties) to ``places`` decimals."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def rate(numerator: float, denominator: float) -> float:
    """Percentage ``numerator / denominator * 100``, or 0 when denominator is 0."""
    if denominator <= 0:
        return 0.0
    return round_half_up(numerator / denominator * 100)


def row_ratio(numerator: float, denominator: float) -> float | None:
    """Percentage for a single row, or NO_DATA when its denominator is 0."""
    if denominator == 0:
        return NO_DATA
    return round_half_up(numerator / denominator * 100)


def _field(row: Any, name: str) -> float:
    if isinstance(row, Mapping):
        value = row.get(name, 0)
    else:
        value = getattr(row, name, 0)
    return value or 0


def aggregate(
    rows: Iterable[Any],
    *,
    sum_fields: Iterable[str],
    rates: Mapping[str, tuple[str, str]] | None = None,
) -> Aggregate:
    """Sum fields across rows and derive rates from the sums.

    Args:
        rows: Mappings or objects exposing the named fields (missing = 0)
        sum_fields: Fields to total
        rates: ``{rate_name: (numerator_field, denominator_field)}``; both
            fields are summed independently before dividing

    Returns:
        Aggregate with ``count``, ``totals`` and ``rates``

    Examples:
        >>> rows = [{"closed": 1, "claimed": 4}, {"closed": 2, "claimed": 4}]
        >>> aggregate(rows, sum_fields=["closed"], rates={"conversion": ("closed", "claimed")}).rates
        {'conversion': 37.5}
    """
    rates = rates or {}
    fields = list(dict.fromkeys([*sum_fields, *(f for pair in rates.values() for f in pair)]))
    totals = dict.fromkeys(fields, 0)
    count = 0
    for row in rows:
        count += 1
        for name in fields:
            totals[name] += _field(row, name)

    return Aggregate(
        count=count,
        totals={name: totals[name] for name in sum_fields},
        rates={name: rate(totals[num], totals[den]) for name, (num, den) in rates.items()},
    )


def aggregate_campaign_stats(campaigns: Iterable[CampaignStats]) -> CampaignAggregate:
    """Campaign totals with open and click rates over delivered."""
    result = aggregate(
        campaigns,
        sum_fields=_CAMPAIGN_FIELDS,
        rates={
            "open_rate": ("unique_opens", "delivered"),
            "click_rate": ("unique_clicks", "delivered"),
        },
    )
    return CampaignAggregate(
        total_campaigns=result.count,
        **{name: int(result.totals[name]) for name in _CAMPAIGN_FIELDS},
        open_rate=result.rates["open_rate"],
        click_rate=result.rates["click_rate"],
    )
