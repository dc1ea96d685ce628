"""Lead filter model and its query-string serialization."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.enums import SortDirection


class LeadFilter(BaseModel):
    """Constraints applied to every page of one retrieval.

    The filter is frozen so it cannot change while a retrieval is running.
    """

    status: tuple[str, ...] = ()
    owner: tuple[str, ...] = ()
    search: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    sort_by: str | None = None
    sort_dir: SortDirection | None = None
    lead_source: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @model_validator(mode="after")
    def validate_date_range(self) -> LeadFilter:
        """Validate date_from <= date_to when both are set."""
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from must be <= date_to")
        return self

    def to_query_params(self, page: int, limit: int) -> dict[str, str]:
        """Build query parameters for one page request.

        Empty lists and unset scalars are omitted. List values are joined
        with commas.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        params = {"page": str(page), "limit": str(limit)}
        if self.status:
            params["status"] = ",".join(self.status)
        if self.owner:
            params["owner"] = ",".join(self.owner)
        if self.search:
            params["search"] = self.search
        if self.sort_by:
            params["sortBy"] = self.sort_by
        if self.sort_dir:
            params["sortDir"] = self.sort_dir.value
        if self.date_from:
            params["from"] = self.date_from.isoformat()
        if self.date_to:
            params["to"] = self.date_to.isoformat()
        if self.lead_source:
            params["leadSource"] = self.lead_source
        return params
