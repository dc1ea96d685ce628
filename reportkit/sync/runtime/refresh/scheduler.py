"""Background refresh scheduler.

The RefreshScheduler keeps cached dashboard data fresh by invalidating and
refetching a set of query keys on a fixed interval.

States:
    - DISABLED: no timer armed
    - IDLE: enabled, waiting for the next tick
    - REFRESHING: enabled, at least one refresh in flight

Behavior:
    - ``toggle_enabled(True)`` arms one repeating timer; ``toggle_enabled(False)``
      cancels it. Refreshes already in flight finish but nothing is rescheduled.
    - Arming the timer also subscribes to visibility changes, so enabling
      again after ``stop()`` restores the refresh on regained visibility.
    - A failing tick is logged and the timer keeps running.
    - A tick while the page is not visible is a no-op.
    - Scheduled refresh failures are swallowed: ``error_count`` grows, the
      error callback fires, and the next tick simply tries again.
    - ``refresh()`` can be called in any state and is not deduplicated against
      a refresh already in flight.
    - The enabled flag is the only persisted state: read once at construction,
      written on every toggle.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from ...config import RefreshConfig
from ...core.enums import RefreshStatus
from .cache import Invalidator
from .stores import PreferenceStore
from .visibility import AlwaysVisible, VisibilitySource

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[], Any]
RefreshErrorCallback = Callable[[Exception], Any]


@dataclass(frozen=True)
class RefreshState:
    """Snapshot of the scheduler's observable state."""

    enabled: bool
    is_refreshing: bool
    last_updated: datetime | None
    error_count: int

    @property
    def status(self) -> RefreshStatus:
        if not self.enabled:
            return RefreshStatus.DISABLED
        return RefreshStatus.REFRESHING if self.is_refreshing else RefreshStatus.IDLE


class RefreshScheduler:
    """Timer-driven refresh of a query cache with visibility pause."""

    def __init__(
        self,
        cache: Invalidator,
        preferences: PreferenceStore,
        *,
        visibility: VisibilitySource | None = None,
        config: RefreshConfig | None = None,
        on_refresh_start: RefreshCallback | None = None,
        on_refresh_complete: RefreshCallback | None = None,
        on_refresh_error: RefreshErrorCallback | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize refresh scheduler.

        Args:
            cache: Store whose queries are invalidated and refetched
            preferences: Store holding the persisted enabled flag
            visibility: Page-visibility signal (default: always visible)
            config: Interval, query keys and storage key
            on_refresh_start: Called when any refresh starts
            on_refresh_complete: Called after a successful refresh
            on_refresh_error: Called with the error after a failed refresh
            clock: Source of ``last_updated`` timestamps
        """
        self._cache = cache
        self._preferences = preferences
        self._visibility = visibility or AlwaysVisible()
        self._config = config or RefreshConfig()
        self._on_refresh_start = on_refresh_start
        self._on_refresh_complete = on_refresh_complete
        self._on_refresh_error = on_refresh_error
        self._clock = clock or (lambda: datetime.now(UTC))

        self._enabled = self._preferences.get(self._config.storage_key) == "true"
        self._last_updated: datetime | None = None
        self._error_count = 0
        self._active_refreshes = 0

        # Single cancellable timer handle
        self._timer_task: asyncio.Task[None] | None = None
        # Refreshes spawned by ticks or visibility changes
        self._background: set[asyncio.Task[Any]] = set()
        self._unsubscribe_visibility: Callable[[], None] | None = None

    # ----------------------
    # Observable state
    # ----------------------
    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def is_refreshing(self) -> bool:
        return self._active_refreshes > 0

    @property
    def last_updated(self) -> datetime | None:
        return self._last_updated

    @property
    def error_count(self) -> int:
        return self._error_count

    @property
    def status(self) -> RefreshStatus:
        return self.state.status

    @property
    def state(self) -> RefreshState:
        return RefreshState(
            enabled=self._enabled,
            is_refreshing=self.is_refreshing,
            last_updated=self._last_updated,
            error_count=self._error_count,
        )

    @property
    def timer_armed(self) -> bool:
        return self._timer_task is not None and not self._timer_task.done()

    # ----------------------
    # Lifecycle
    # ----------------------
    async def start(self) -> None:
        """Arm the timer if the persisted preference enabled auto-refresh."""
        self._subscribe_visibility()
        if self._enabled:
            self._arm()

    async def stop(self) -> None:
        """Clear the timer and let in-flight refreshes finish."""
        if self._unsubscribe_visibility is not None:
            self._unsubscribe_visibility()
            self._unsubscribe_visibility = None
        await self._disarm()
        if self._background:
            await asyncio.gather(*self._background, return_exceptions=True)
        logger.debug("RefreshScheduler stopped")

    async def __aenter__(self) -> RefreshScheduler:
        await self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.stop()

    def toggle_enabled(self, value: bool) -> None:
        """Enable or disable auto-refresh and persist the choice."""
        self._enabled = value
        self._preferences.set(self._config.storage_key, "true" if value else "false")
        if value:
            self._arm()
        else:
            self._cancel_timer()

    # ----------------------
    # Triggers
    # ----------------------
    def tick(self) -> asyncio.Task[Any] | None:
        """Handle one timer tick.

        Returns:
            The spawned refresh task, or None when the tick was skipped
            (disabled, or page not visible)
        """
        if not self._enabled:
            return None
        if not self._visibility.is_visible():
            logger.debug("Auto refresh tick skipped: page not visible")
            return None
        return self._spawn_refresh()

    def notify_visibility_change(self, visible: bool) -> asyncio.Task[Any] | None:
        """Refresh immediately when the page becomes visible while enabled."""
        if not (visible and self._enabled and self._config.refresh_on_visible):
            return None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return None
        return self._spawn_refresh()

    async def refresh(self, *, propagate: bool = False) -> Any:
        """Invalidate and refetch now.

        Applies the same bookkeeping as a scheduled refresh.

        Args:
            propagate: Re-raise the failure after bookkeeping instead of
                returning None

        Returns:
            The cache's refetch result, or None if the refresh failed
        """
        self._active_refreshes += 1
        try:
            await self._notify(self._on_refresh_start)
            result = await self._invalidate()
        except Exception as e:
            self._error_count += 1
            logger.warning(f"Auto refresh failed ({self._error_count} consecutive): {e}")
            await self._notify(self._on_refresh_error, e)
            if propagate:
                raise
            return None
        finally:
            self._active_refreshes -= 1

        self._last_updated = self._clock()
        self._error_count = 0
        await self._notify(self._on_refresh_complete)
        return result

    # ----------------------
    # Internals
    # ----------------------
    async def _invalidate(self) -> Any:
        if self._config.min_refresh_seconds <= 0:
            return await self._cache.invalidate_and_refetch(list(self._config.query_keys))

        floor = asyncio.ensure_future(asyncio.sleep(self._config.min_refresh_seconds))
        try:
            result = await self._cache.invalidate_and_refetch(list(self._config.query_keys))
        except BaseException:
            floor.cancel()
            raise
        await floor
        return result

    def _subscribe_visibility(self) -> None:
        subscribe = getattr(self._visibility, "subscribe", None)
        if callable(subscribe) and self._unsubscribe_visibility is None:
            self._unsubscribe_visibility = subscribe(self.notify_visibility_change)

    def _spawn_refresh(self) -> asyncio.Task[Any]:
        task = asyncio.create_task(self.refresh())
        self._background.add(task)
        task.add_done_callback(self._background.discard)
        return task

    def _arm(self) -> None:
        if self.timer_armed:
            return
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No loop yet; start() arms the timer
            logger.debug("Auto refresh enabled before event loop start; deferring timer")
            return
        self._subscribe_visibility()
        self._timer_task = asyncio.create_task(self._timer_loop())

    def _cancel_timer(self) -> asyncio.Task[None] | None:
        task, self._timer_task = self._timer_task, None
        if task is not None and not task.done():
            task.cancel()
        return task

    async def _disarm(self) -> None:
        task = self._cancel_timer()
        if task is not None:
            try:
                await task
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.error(f"Auto refresh timer had failed: {e}")

    async def _timer_loop(self) -> None:
        while True:
            await asyncio.sleep(self._config.interval)
            try:
                self.tick()
            except Exception as e:
                logger.error(f"Error in auto refresh tick: {e}")

    async def _notify(self, callback: Callable[..., Any] | None, *args: Any) -> None:
        if callback is None:
            return
        try:
            result = callback(*args)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            logger.error(f"Error in refresh callback: {e}")
