"""Core enumerations shared across the retrieval, refresh and analytics layers.

Design Decisions:
    - String enums: values serialize straight into query strings and JSON
    - Lower-case values match what the dashboard backend and UI exchange
"""

from enum import Enum


class TrendDirection(str, Enum):
    """Coarse direction of a time series, comparing its two halves."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RefreshStatus(str, Enum):
    """States of the background refresh scheduler."""

    DISABLED = "disabled"
    IDLE = "idle"
    REFRESHING = "refreshing"


class SortDirection(str, Enum):
    """Sort direction accepted by the leads endpoint."""

    ASC = "asc"
    DESC = "desc"
