"""Background refresh of cached dashboard data."""

from .cache import CacheEntry, Invalidator, QueryCache
from .scheduler import RefreshScheduler, RefreshState
from .stores import InMemoryPreferenceStore, JSONFilePreferenceStore, PreferenceStore
from .visibility import AlwaysVisible, VisibilityFlag, VisibilitySource

__all__ = [
    "RefreshScheduler",
    "RefreshState",
    "QueryCache",
    "CacheEntry",
    "Invalidator",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "JSONFilePreferenceStore",
    "VisibilitySource",
    "VisibilityFlag",
    "AlwaysVisible",
]
