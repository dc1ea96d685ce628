"""Runtime layer: bulk retrieval, REST transport and background refresh."""

from .paging import BulkFetcher, BulkResult, PagePlanner, PageResult, PageSource, ProgressEvent
from .refresh import (
    InMemoryPreferenceStore,
    JSONFilePreferenceStore,
    PreferenceStore,
    QueryCache,
    RefreshScheduler,
    VisibilityFlag,
    VisibilitySource,
)
from .rest import HTTPClient, RESTPageSource

__all__ = [
    "BulkFetcher",
    "BulkResult",
    "PagePlanner",
    "PageResult",
    "PageSource",
    "ProgressEvent",
    "HTTPClient",
    "RESTPageSource",
    "RefreshScheduler",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JSONFilePreferenceStore",
    "VisibilitySource",
    "VisibilityFlag",
    "QueryCache",
]
