"""Metric row models consumed by the analytics layer."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class DailyMetric(BaseModel):
    """Per-day activity of one salesperson (or a team average)."""

    date: dt.date
    claimed: int = Field(default=0, ge=0)
    contacted: int = Field(default=0, ge=0)
    closed: int = Field(default=0, ge=0)
    conversion_rate: float = Field(default=0.0, ge=0, alias="conversionRate")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class CampaignStats(BaseModel):
    """Delivery and engagement counters of one campaign."""

    campaign_id: str | int | None = Field(default=None, alias="campaignId")
    campaign_name: str | None = Field(default=None, alias="campaignName")
    delivered: int = Field(default=0, ge=0)
    opened: int = Field(default=0, ge=0)
    clicked: int = Field(default=0, ge=0)
    unique_opens: int = Field(default=0, ge=0, alias="uniqueOpens")
    unique_clicks: int = Field(default=0, ge=0, alias="uniqueClicks")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


class CampaignAggregate(BaseModel):
    """Campaign totals with open/click rates over delivered."""

    total_campaigns: int
    delivered: int
    opened: int
    clicked: int
    unique_opens: int
    unique_clicks: int
    open_rate: float
    click_rate: float

    model_config = ConfigDict(frozen=True)


class Aggregate(BaseModel):
    """Generic rollup: row count, summed fields and derived rates."""

    count: int = Field(..., ge=0)
    totals: dict[str, int | float] = Field(default_factory=dict)
    rates: dict[str, float] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
