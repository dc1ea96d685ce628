"""Core components."""

from .enums import RefreshStatus, SortDirection, TrendDirection
from .exceptions import (
    FormatError,
    LogicalError,
    PaginationMismatchError,
    RefreshError,
    SyncError,
    TransportError,
)

__all__ = [
    "TrendDirection",
    "RefreshStatus",
    "SortDirection",
    "SyncError",
    "TransportError",
    "LogicalError",
    "FormatError",
    "PaginationMismatchError",
    "RefreshError",
]
