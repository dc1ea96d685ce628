"""Shared constants and configuration for retrieval and refresh.

This module centralizes page sizes, concurrency bounds and refresh timing so
the engine and scheduler modules stay small and focused.
"""

from __future__ import annotations

from dataclasses import dataclass

# Backend MAX_LIMIT is 100 rows per page
EXPORT_PAGE_SIZE = 100

# Concurrent page requests per bulk retrieval
MAX_CONCURRENT_REQUESTS = 3

# Background refresh cadence, bound by the backend rate limit
REFRESH_INTERVAL_SECONDS = 60.0

# Minimum duration of one refresh so a spinner stays visible
MIN_REFRESH_SECONDS = 0.5

AUTO_REFRESH_STORAGE_KEY = "dashboard-auto-refresh"
DASHBOARD_QUERY_KEYS: tuple[str, ...] = ("dashboard", "dashboardData")

# >10% change between halves = up/down, else stable
TREND_THRESHOLD_PERCENT = 10.0

DEFAULT_LEADS_PATH = "/api/admin/leads"
DEFAULT_RECORDS_KEY = "leads"
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(frozen=True)
class BulkFetchConfig:
    """Settings for one bulk retrieval.

    Attributes:
        page_size: Records requested per page
        max_concurrency: Maximum page requests in flight at once
        strict_totals: Fail when a later page reports totals different from page 1
    """

    page_size: int = EXPORT_PAGE_SIZE
    max_concurrency: int = MAX_CONCURRENT_REQUESTS
    strict_totals: bool = False

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.max_concurrency <= 0:
            raise ValueError("max_concurrency must be positive")


@dataclass(frozen=True)
class RefreshConfig:
    """Settings for the background refresh scheduler.

    Attributes:
        interval: Seconds between timer ticks
        min_refresh_seconds: Lower bound on a single refresh duration
        query_keys: Cache keys invalidated on each refresh
        storage_key: Preference key holding the persisted enabled flag
        refresh_on_visible: Refresh immediately when the page becomes visible again
    """

    interval: float = REFRESH_INTERVAL_SECONDS
    min_refresh_seconds: float = MIN_REFRESH_SECONDS
    query_keys: tuple[str, ...] = DASHBOARD_QUERY_KEYS
    storage_key: str = AUTO_REFRESH_STORAGE_KEY
    refresh_on_visible: bool = True

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be positive")
        if self.min_refresh_seconds < 0:
            raise ValueError("min_refresh_seconds cannot be negative")
