"""Wire models for the backend's paginated response envelope.

Shape::

    {
        "success": true,
        "data": {"leads": [...], "pagination": {"total": 250, "totalPages": 3}},
        "error": {"message": "...", "code": "..."}
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PaginationMeta(BaseModel):
    """Pagination block of a page response."""

    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0, alias="totalPages")
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ErrorPayload(BaseModel):
    """Error block reported alongside ``success=false``."""

    message: str | None = None
    code: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


class PageEnvelope(BaseModel):
    """Top-level response envelope."""

    success: bool
    data: dict[str, Any] | None = None
    error: ErrorPayload | None = None

    model_config = ConfigDict(extra="ignore")
