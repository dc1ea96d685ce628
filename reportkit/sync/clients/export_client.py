"""High-level client for exporting every lead that matches a filter.

Wraps an HTTPClient, a RESTPageSource and a BulkFetcher behind one async
context manager for service layers and scripts:

    async with LeadExportClient("https://dashboard.example.com") as client:
        result = await client.fetch_all(LeadFilter(status=("new",)), on_progress=print)
"""

from __future__ import annotations

import logging

from ..config import DEFAULT_HTTP_TIMEOUT, DEFAULT_LEADS_PATH, BulkFetchConfig
from ..models import LeadFilter
from ..runtime.paging import BulkFetcher, BulkResult, ProgressCallback
from ..runtime.rest import HTTPClient, PageResponseAdapter, RESTPageSource

logger = logging.getLogger(__name__)


class LeadExportClient:
    """Bulk export client for the leads endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        *,
        path: str = DEFAULT_LEADS_PATH,
        config: BulkFetchConfig | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        headers: dict[str, str] | None = None,
        adapter: PageResponseAdapter | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or HTTPClient(base_url=base_url, timeout=timeout, headers=headers)
        self._source = RESTPageSource(self._http, path=path, adapter=adapter)
        self._fetcher = BulkFetcher(self._source, config, endpoint_id=path)

    @property
    def fetcher(self) -> BulkFetcher:
        return self._fetcher

    async def fetch_all(
        self,
        filter: LeadFilter | None = None,
        *,
        on_progress: ProgressCallback | None = None,
    ) -> BulkResult:
        """Fetch every lead matching ``filter`` (all leads when None).

        Raises:
            TransportError, LogicalError, FormatError: the first page failure
        """
        filter = filter or LeadFilter()
        result = await self._fetcher.fetch_all(filter, on_progress=on_progress)
        if len(result.records) != result.total:
            logger.warning(
                f"Export received {len(result.records)} records but backend reported {result.total}"
            )
        return result

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> LeadExportClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
