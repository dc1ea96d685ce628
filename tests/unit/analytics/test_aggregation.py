"""Unit tests for rate rollups."""

from types import SimpleNamespace

import pytest

from reportkit.sync.analytics import (
    NO_DATA,
    aggregate,
    aggregate_campaign_stats,
    rate,
    round_half_up,
    row_ratio,
)
from reportkit.sync.models import CampaignStats


class TestRounding:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.25, 0.3), (2.45, 2.5), (6.25, 6.3), (33.333, 33.3), (-0.25, -0.3), (40.0, 40.0)],
    )
    def test_round_half_up(self, value, expected):
        """Test ties round away from zero, unlike banker's rounding."""
        assert round_half_up(value) == expected

    def test_round_half_up_places(self):
        assert round_half_up(1.005, places=2) == 1.01
        assert round_half_up(2.5, places=0) == 3.0


class TestRates:
    def test_rate(self):
        assert rate(1, 3) == 33.3
        assert rate(2, 3) == 66.7
        assert rate(1, 16) == 6.3

    def test_rate_zero_denominator(self):
        """Test an aggregate over a zero denominator is 0, never an error."""
        assert rate(0, 0) == 0.0
        assert rate(5, 0) == 0.0

    def test_row_ratio_no_data(self):
        """Test a row with zero denominator has no data rather than 0."""
        assert row_ratio(3, 0) is NO_DATA
        assert row_ratio(0, 4) == 0.0
        assert row_ratio(3, 4) == 75.0


class TestAggregate:
    """Test summing rows and deriving rates from sums."""

    def test_conversion_rate_from_summed_fields(self):
        """Test the rate divides summed numerators by summed denominators."""
        rows = [
            {"closed": 1, "claimed": 4},
            {"closed": 2, "claimed": 4},
            {"closed": 0, "claimed": 0},
        ]

        result = aggregate(
            rows,
            sum_fields=["closed", "claimed"],
            rates={"conversion_rate": ("closed", "claimed")},
        )

        assert result.count == 3
        assert result.totals == {"closed": 3, "claimed": 8}
        assert all(isinstance(v, int) for v in result.totals.values())
        assert result.rates == {"conversion_rate": 37.5}

    def test_not_mean_of_row_rates(self):
        """Test rows with different denominators are weighted by their sums."""
        rows = [{"closed": 1, "claimed": 1}, {"closed": 0, "claimed": 9}]

        result = aggregate(rows, sum_fields=[], rates={"conversion_rate": ("closed", "claimed")})

        assert result.rates["conversion_rate"] == 10.0

    def test_empty_rows(self):
        result = aggregate([], sum_fields=["closed"], rates={"conversion_rate": ("closed", "claimed")})

        assert result.count == 0
        assert result.totals == {"closed": 0}
        assert result.rates == {"conversion_rate": 0.0}

    def test_objects_and_missing_fields(self):
        """Test attribute rows work and missing or None fields count as 0."""
        rows = [SimpleNamespace(closed=2, claimed=5), SimpleNamespace(closed=None), {"claimed": 5}]

        result = aggregate(rows, sum_fields=["closed", "claimed"], rates={"r": ("closed", "claimed")})

        assert result.totals == {"closed": 2, "claimed": 10}
        assert result.rates == {"r": 20.0}


class TestCampaignAggregate:
    def test_open_and_click_rates(self):
        campaigns = [
            CampaignStats(delivered=200, opened=90, clicked=20, unique_opens=80, unique_clicks=10),
            CampaignStats(delivered=100, opened=40, clicked=5, unique_opens=25, unique_clicks=5),
        ]

        result = aggregate_campaign_stats(campaigns)

        assert result.total_campaigns == 2
        assert result.delivered == 300
        assert result.opened == 130
        assert result.unique_opens == 105
        assert result.open_rate == 35.0
        assert result.click_rate == 5.0

    def test_nothing_delivered(self):
        result = aggregate_campaign_stats([CampaignStats(campaign_name="Draft")])

        assert result.open_rate == 0.0
        assert result.click_rate == 0.0
