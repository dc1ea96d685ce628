"""Page-visibility signal consumed by the refresh scheduler."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

VisibilityListener = Callable[[bool], object]


class VisibilitySource(Protocol):
    """Protocol for a boolean "page currently visible" signal, polled each tick."""

    def is_visible(self) -> bool:
        ...


class AlwaysVisible:
    """Visibility source for headless use: always visible."""

    def is_visible(self) -> bool:
        return True


class VisibilityFlag:
    """Settable visibility signal with change listeners.

    Listeners fire only when the value actually changes.
    """

    def __init__(self, visible: bool = True) -> None:
        self._visible = visible
        self._listeners: list[VisibilityListener] = []

    def is_visible(self) -> bool:
        return self._visible

    def set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        for listener in list(self._listeners):
            try:
                listener(visible)
            except Exception as e:
                logger.error(f"Error in visibility listener: {e}")

    def subscribe(self, listener: VisibilityListener) -> Callable[[], None]:
        """Register ``listener``; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
