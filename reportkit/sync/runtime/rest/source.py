"""REST page source using a response adapter.

RESTPageSource implements the PageSource protocol on top of HTTPClient:
it serializes the filter into query parameters, issues one GET per page and
hands the decoded body to a PageResponseAdapter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ...config import DEFAULT_LEADS_PATH, DEFAULT_RECORDS_KEY
from ...core.exceptions import FormatError, LogicalError
from ...models import LeadFilter, PageEnvelope, PaginationMeta
from ..paging.definitions import PageResult
from .http_client import HTTPClient


class PageResponseAdapter:
    """Turns a ``{success, data, error}`` envelope into a PageResult."""

    def __init__(
        self,
        records_key: str = DEFAULT_RECORDS_KEY,
        record_parser: Callable[[Any], Any] | None = None,
    ) -> None:
        self._records_key = records_key
        self._record_parser = record_parser

    def parse(self, response: Any) -> PageResult:
        """Parse one decoded response body.

        Raises:
            LogicalError: ``success`` is false
            FormatError: Envelope, records list or pagination block is malformed
        """
        try:
            envelope = PageEnvelope.model_validate(response)
        except ValidationError as e:
            raise FormatError() from e

        if not envelope.success:
            error = envelope.error
            raise LogicalError(
                (error.message if error and error.message else None) or "Unknown error",
                code=error.code if error else None,
            )

        data = envelope.data
        if data is None:
            raise FormatError()

        records = data.get(self._records_key)
        if not isinstance(records, list):
            raise FormatError()

        try:
            meta = PaginationMeta.model_validate(data.get("pagination"))
        except ValidationError as e:
            raise FormatError() from e

        if self._record_parser is not None:
            try:
                records = [self._record_parser(record) for record in records]
            except ValueError as e:
                # pydantic.ValidationError is a ValueError
                raise FormatError(f"Invalid record in page response: {e}") from e

        return PageResult(records=records, total=meta.total, total_pages=meta.total_pages)


class RESTPageSource:
    """Paginated data source backed by a JSON REST endpoint."""

    def __init__(
        self,
        http: HTTPClient,
        *,
        path: str = DEFAULT_LEADS_PATH,
        adapter: PageResponseAdapter | None = None,
    ) -> None:
        self._http = http
        self._path = path
        self._adapter = adapter or PageResponseAdapter()

    async def fetch(self, filter: LeadFilter, page: int, limit: int) -> PageResult:
        body = await self._http.get(self._path, params=filter.to_query_params(page, limit))
        return self._adapter.parse(body)
