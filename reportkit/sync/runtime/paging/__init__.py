"""Bulk retrieval layer for paginated backends.

Architecture:
    The paging layer consists of:
    - definitions.py: Policy, plan and result structures, PageSource protocol
    - planners.py: Splits pages 2..N into sequential bounded batches
    - executors.py: Fetches page 1, then each batch concurrently, in page order
    - telemetry.py: Structured logging

Usage:
    fetcher = BulkFetcher(source, BulkFetchConfig(page_size=100, max_concurrency=3))
    result = await fetcher.fetch_all(LeadFilter(status=("new",)), on_progress=print)
"""

from __future__ import annotations

from .definitions import (
    BulkResult,
    PagePlan,
    PagePolicy,
    PageResult,
    PageSource,
    ProgressCallback,
    ProgressEvent,
)
from .executors import BulkFetcher
from .planners import PagePlanner

__all__ = [
    "PagePolicy",
    "PagePlan",
    "PageResult",
    "PageSource",
    "BulkResult",
    "ProgressEvent",
    "ProgressCallback",
    "PagePlanner",
    "BulkFetcher",
]
