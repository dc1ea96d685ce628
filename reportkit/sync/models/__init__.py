"""Data models."""

from .envelope import ErrorPayload, PageEnvelope, PaginationMeta
from .filters import LeadFilter
from .metrics import Aggregate, CampaignAggregate, CampaignStats, DailyMetric

__all__ = [
    "LeadFilter",
    "PageEnvelope",
    "PaginationMeta",
    "ErrorPayload",
    "DailyMetric",
    "CampaignStats",
    "CampaignAggregate",
    "Aggregate",
]
