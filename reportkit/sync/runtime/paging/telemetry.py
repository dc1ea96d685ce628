"""Structured logging for bulk retrieval.

This module provides telemetry hooks for the page planner and bulk fetcher,
emitting structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import BulkResult

logger = logging.getLogger(__name__)


def log_page_plan(
    *,
    endpoint_id: str,
    total_pages: int,
    total_batches: int,
    max_concurrency: int,
) -> None:
    """Log page plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_pages: Page count reported by page 1
        total_batches: Number of batches planned for pages 2..N
        max_concurrency: Maximum pages per batch
    """
    logger.info(
        "page_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_pages": total_pages,
            "total_batches": total_batches,
            "max_concurrency": max_concurrency,
        },
    )


def log_page_completed(
    *,
    endpoint_id: str,
    page: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page request."""
    logger.debug(
        "page_completed",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_batch_completed(
    *,
    endpoint_id: str,
    batch_index: int,
    pages: list[int],
    loaded: int,
    total: int,
) -> None:
    """Log completion of one batch of concurrent page requests."""
    logger.info(
        "page_batch_completed",
        extra={
            "endpoint_id": endpoint_id,
            "batch_index": batch_index,
            "pages": pages,
            "loaded": loaded,
            "total": total,
        },
    )


def log_bulk_complete(
    *,
    endpoint_id: str,
    result: BulkResult,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a bulk retrieval."""
    logger.info(
        "bulk_fetch_complete",
        extra={
            "endpoint_id": endpoint_id,
            "records": len(result.records),
            "total": result.total,
            "pages_fetched": result.pages_fetched,
            "batches_used": result.batches_used,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page: int,
    error_type: str,
    error_message: str,
    status_code: int | None = None,
) -> None:
    """Log a page failure that aborts the retrieval.

    Args:
        endpoint_id: Endpoint identifier
        page: Page number that failed
        error_type: Exception class name (e.g., "TransportError")
        error_message: Error message
        status_code: HTTP status if the transport reported one
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
            "status_code": status_code,
        },
    )
