"""ReportKit Sync - bulk retrieval and background refresh for reporting dashboards."""

from .analytics import (
    NO_DATA,
    aggregate,
    aggregate_campaign_stats,
    classify_metric_trend,
    classify_trend,
    display_range,
    format_rate,
    rate,
    rate_sort_value,
    round_half_up,
    row_ratio,
)
from .clients import LeadExportClient
from .config import BulkFetchConfig, RefreshConfig
from .core import (
    FormatError,
    LogicalError,
    PaginationMismatchError,
    RefreshError,
    RefreshStatus,
    SortDirection,
    SyncError,
    TransportError,
    TrendDirection,
)
from .models import (
    Aggregate,
    CampaignAggregate,
    CampaignStats,
    DailyMetric,
    LeadFilter,
)
from .runtime.paging import BulkFetcher, BulkResult, PagePlanner, PageResult, ProgressEvent
from .runtime.refresh import (
    AlwaysVisible,
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    QueryCache,
    RefreshScheduler,
    RefreshState,
    VisibilityFlag,
)
from .runtime.rest import HTTPClient, PageResponseAdapter, RESTPageSource

__version__ = "0.1.0"

__all__ = [
    # Config
    "BulkFetchConfig",
    "RefreshConfig",
    # Core
    "TrendDirection",
    "RefreshStatus",
    "SortDirection",
    "SyncError",
    "TransportError",
    "LogicalError",
    "FormatError",
    "PaginationMismatchError",
    "RefreshError",
    # Models
    "LeadFilter",
    "DailyMetric",
    "CampaignStats",
    "CampaignAggregate",
    "Aggregate",
    # Bulk retrieval
    "BulkFetcher",
    "BulkResult",
    "PagePlanner",
    "PageResult",
    "ProgressEvent",
    "HTTPClient",
    "RESTPageSource",
    "PageResponseAdapter",
    "LeadExportClient",
    # Refresh
    "RefreshScheduler",
    "RefreshState",
    "QueryCache",
    "InMemoryPreferenceStore",
    "JSONFilePreferenceStore",
    "VisibilityFlag",
    "AlwaysVisible",
    # Analytics
    "NO_DATA",
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
