"""Keyed query cache with invalidate-and-refetch.

Each key maps to an async loader. ``invalidate_and_refetch`` reruns the
loaders for the selected keys concurrently and replaces their cached values.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol

from ...core.exceptions import RefreshError

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[Any]]


class Invalidator(Protocol):
    """Protocol for the cache/store the refresh scheduler invalidates."""

    async def invalidate_and_refetch(self, keys: Sequence[str] | None = None) -> Any:
        ...


@dataclass
class CacheEntry:
    """Cached value of one query key."""

    value: Any = None
    updated_at: datetime | None = None
    fetch_count: int = 0


class QueryCache:
    """In-memory query cache keyed by string."""

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._loaders: dict[str, Loader] = {}
        self._entries: dict[str, CacheEntry] = {}
        self._clock = clock or (lambda: datetime.now(UTC))

    def register(self, key: str, loader: Loader) -> None:
        """Register (or replace) the loader for ``key``."""
        self._loaders[key] = loader
        self._entries.setdefault(key, CacheEntry())

    def unregister(self, key: str) -> None:
        self._loaders.pop(key, None)
        self._entries.pop(key, None)

    @property
    def keys(self) -> list[str]:
        return list(self._loaders)

    def get(self, key: str) -> Any:
        """Return the cached value for ``key`` (None if never loaded)."""
        entry = self._entries.get(key)
        return entry.value if entry else None

    def entry(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    async def fetch(self, key: str) -> Any:
        """Run the loader for ``key`` and cache its value.

        Raises:
            KeyError: No loader registered for ``key``
        """
        loader = self._loaders[key]
        value = await loader()
        entry = self._entries.setdefault(key, CacheEntry())
        entry.value = value
        entry.updated_at = self._clock()
        entry.fetch_count += 1
        return value

    async def invalidate_and_refetch(self, keys: Sequence[str] | None = None) -> dict[str, Any]:
        """Refetch the given keys (all registered keys when None).

        Keys without a registered loader are ignored. Every selected loader runs
        to completion; if any failed, the others keep their new values and a
        RefreshError naming the failed keys is raised.

        Returns:
            Mapping of refetched key to its new value
        """
        selected = self._select(keys)
        if not selected:
            return {}

        results = await asyncio.gather(*(self.fetch(key) for key in selected), return_exceptions=True)

        failed = [(key, r) for key, r in zip(selected, results) if isinstance(r, BaseException)]
        if failed:
            for key, error in failed:
                logger.warning(f"Refetch failed for query {key!r}: {error}")
            raise RefreshError(
                f"Refetch failed for {len(failed)} of {len(selected)} queries",
                failed_keys=[key for key, _ in failed],
            ) from failed[0][1]

        return dict(zip(selected, results))

    def _select(self, keys: Iterable[str] | None) -> list[str]:
        if keys is None:
            return list(self._loaders)
        return [key for key in keys if key in self._loaders]
