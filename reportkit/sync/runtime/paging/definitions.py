"""Paging metadata definitions and result structures.

This module defines the data structures exchanged between the page planner,
the bulk fetcher and a paginated data source.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from ...config import BulkFetchConfig
from ...models import LeadFilter

ProgressCallback = Callable[[int, int], None]


@dataclass(frozen=True)
class PagePolicy:
    """Paging policy for one bulk retrieval.

    Attributes:
        page_size: Number of records requested per page
        max_concurrency: Maximum page requests in flight at once (K)
    """

    page_size: int
    max_concurrency: int

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.max_concurrency <= 0:
            raise ValueError("max_concurrency must be positive")

    @classmethod
    def from_config(cls, config: BulkFetchConfig) -> PagePolicy:
        return cls(page_size=config.page_size, max_concurrency=config.max_concurrency)


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single page request.

    Attributes:
        page: One-based page number
        limit: Page size sent to the backend
        batch_index: Zero-based batch the page belongs to (page 1 has its own batch)
    """

    page: int
    limit: int
    batch_index: int = 0


@dataclass(frozen=True)
class PageResult:
    """One page of records plus the pagination metadata reported with it."""

    records: list[Any]
    total: int
    total_pages: int


@dataclass(frozen=True)
class ProgressEvent:
    """Cumulative progress of a bulk retrieval."""

    loaded: int
    total: int


@dataclass
class BulkResult:
    """Result of a bulk retrieval.

    Attributes:
        records: Page-order concatenation of every page received
        total: Total reported by page 1
        pages_fetched: Number of page requests that completed
        batches_used: Number of batches executed, page 1 included
        progress: Progress events emitted, in order
    """

    records: list[Any]
    total: int
    pages_fetched: int = 0
    batches_used: int = 0
    progress: list[ProgressEvent] = field(default_factory=list)


class PageSource(Protocol):
    """Protocol for a backend that serves one page of records at a time.

    Implementations raise TransportError, LogicalError or FormatError on failure.
    """

    async def fetch(self, filter: LeadFilter, page: int, limit: int) -> PageResult:
        """Fetch one page of records matching ``filter``."""
        ...
