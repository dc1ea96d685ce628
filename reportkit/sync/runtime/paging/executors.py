"""Bulk retrieval over a paginated data source.

This module provides the BulkFetcher class that reads page 1 to discover the
page count, then fetches the remaining pages in sequential batches of at most
``max_concurrency`` concurrent requests, concatenating records in page order.
"""

from __future__ import annotations

import asyncio
import logging
from time import perf_counter

from ...config import BulkFetchConfig
from ...core.exceptions import PaginationMismatchError
from ...models import LeadFilter
from .definitions import (
    BulkResult,
    PagePlan,
    PagePolicy,
    PageResult,
    PageSource,
    ProgressCallback,
    ProgressEvent,
)
from .planners import PagePlanner
from .telemetry import log_batch_completed, log_bulk_complete, log_page_completed, log_page_error

logger = logging.getLogger(__name__)


class BulkFetcher:
    """Reconstructs a complete filtered result set from a paginated source.

    The fetcher holds no per-retrieval state, so one instance can serve
    concurrent ``fetch_all`` calls. Each call owns its own semaphore, which
    caps page requests in flight at ``max_concurrency``.

    Any page failure aborts the whole retrieval: outstanding requests of the
    batch are cancelled and the error propagates. No partial result is returned.
    """

    def __init__(
        self,
        source: PageSource,
        config: BulkFetchConfig | None = None,
        *,
        endpoint_id: str = "leads",
    ) -> None:
        """Initialize bulk fetcher.

        Args:
            source: Paginated data source
            config: Page size, concurrency bound and totals policy
            endpoint_id: Identifier used in telemetry
        """
        self._source = source
        self._config = config or BulkFetchConfig()
        self._planner = PagePlanner(PagePolicy.from_config(self._config))
        self._endpoint_id = endpoint_id

    @property
    def config(self) -> BulkFetchConfig:
        return self._config

    async def fetch_all(
        self,
        filter: LeadFilter,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> BulkResult:
        """Fetch every record matching ``filter``.

        Args:
            filter: Constraints applied to every page
            on_progress: Optional ``(loaded, total)`` callback, invoked once after
                page 1 and once after each batch

        Returns:
            BulkResult with records in page order and the total reported by page 1

        Raises:
            TransportError: A page request failed at the network/HTTP level
            LogicalError: The backend reported a failure
            FormatError: A page carried malformed pagination metadata
        """
        started = perf_counter()
        semaphore = asyncio.Semaphore(self._config.max_concurrency)

        first_plan = self._planner.first_page()
        first = await self._fetch_page(filter, first_plan, semaphore)
        total, total_pages = first.total, first.total_pages

        result = BulkResult(records=list(first.records), total=total, pages_fetched=1, batches_used=1)
        self._emit_progress(result, on_progress)

        if total_pages <= 1:
            log_bulk_complete(
                endpoint_id=self._endpoint_id,
                result=result,
                total_latency_ms=(perf_counter() - started) * 1000.0,
            )
            return result

        batches = self._planner.plan_remaining(total_pages, endpoint_id=self._endpoint_id)
        for batch in batches:
            pages = await self._run_batch(filter, batch, semaphore)
            # gather() preserves argument order, so this is page order
            for plan, page in zip(batch, pages):
                if self._config.strict_totals:
                    self._check_totals(plan, page, total, total_pages)
                result.records.extend(page.records)
            result.pages_fetched += len(batch)
            result.batches_used += 1

            log_batch_completed(
                endpoint_id=self._endpoint_id,
                batch_index=batch[0].batch_index,
                pages=[plan.page for plan in batch],
                loaded=len(result.records),
                total=total,
            )
            self._emit_progress(result, on_progress)

        log_bulk_complete(
            endpoint_id=self._endpoint_id,
            result=result,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return result

    async def _run_batch(
        self,
        filter: LeadFilter,
        batch: list[PagePlan],
        semaphore: asyncio.Semaphore,
    ) -> list[PageResult]:
        """Run one batch concurrently and wait for all of it.

        On the first failure the remaining requests are cancelled before the
        error is re-raised.
        """
        tasks = [
            asyncio.create_task(self._fetch_page(filter, plan, semaphore)) for plan in batch
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _fetch_page(
        self,
        filter: LeadFilter,
        plan: PagePlan,
        semaphore: asyncio.Semaphore,
    ) -> PageResult:
        async with semaphore:
            page_start = perf_counter()
            try:
                page = await self._source.fetch(filter, plan.page, plan.limit)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    page=plan.page,
                    error_type=type(e).__name__,
                    error_message=str(e),
                    status_code=getattr(e, "status_code", None),
                )
                raise

        log_page_completed(
            endpoint_id=self._endpoint_id,
            page=plan.page,
            rows=len(page.records),
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return page

    def _check_totals(self, plan: PagePlan, page: PageResult, total: int, total_pages: int) -> None:
        if (page.total, page.total_pages) != (total, total_pages):
            raise PaginationMismatchError(
                f"Page {plan.page} reported total={page.total}, totalPages={page.total_pages}; "
                f"page 1 reported total={total}, totalPages={total_pages}",
                page=plan.page,
                expected=(total, total_pages),
                actual=(page.total, page.total_pages),
            )

    def _emit_progress(self, result: BulkResult, on_progress: ProgressCallback | None) -> None:
        event = ProgressEvent(loaded=len(result.records), total=result.total)
        result.progress.append(event)
        if on_progress is None:
            return
        try:
            on_progress(event.loaded, event.total)
        except Exception as e:
            logger.error(f"Error in progress callback: {e}")
