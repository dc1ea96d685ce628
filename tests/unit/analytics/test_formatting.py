"""Unit tests for display helpers."""

import pytest

from reportkit.sync.analytics import NOT_AVAILABLE, display_range, format_rate, rate_sort_value


def test_format_rate():
    assert format_rate(13, 40) == "32.5%"
    assert format_rate(0, 40) == "0.0%"
    assert format_rate(1, 3) == "33.3%"


def test_format_rate_no_data():
    assert format_rate(0, 0) == NOT_AVAILABLE


def test_rate_sort_value_puts_no_data_last():
    """Test rows without data sort below a genuine 0%."""
    values = sorted([rate_sort_value(0, 0), rate_sort_value(0, 10), rate_sort_value(5, 10)], reverse=True)

    assert values == [50.0, 0.0, -1.0]


@pytest.mark.parametrize(
    "page,limit,total,expected",
    [
        (1, 20, 50, (1, 20)),
        (3, 20, 50, (41, 50)),
        (1, 20, 0, (0, 0)),
        (1, 100, 100, (1, 100)),
    ],
)
def test_display_range(page, limit, total, expected):
    assert display_range(page, limit, total) == expected
