"""Page planning logic for bulk retrieval.

This module provides the PagePlanner class that splits pages ``2..N`` into
sequential batches of at most ``max_concurrency`` pages.
"""

from __future__ import annotations

from .definitions import PagePlan, PagePolicy
from .telemetry import log_page_plan


class PagePlanner:
    """Plans page batches for a paginated retrieval."""

    def __init__(self, policy: PagePolicy) -> None:
        self._policy = policy

    @property
    def policy(self) -> PagePolicy:
        return self._policy

    def first_page(self) -> PagePlan:
        """Plan for the discovery request (page 1)."""
        return PagePlan(page=1, limit=self._policy.page_size, batch_index=0)

    def plan_remaining(self, total_pages: int, *, endpoint_id: str = "unknown") -> list[list[PagePlan]]:
        """Plan batches for pages ``2..total_pages``.

        Args:
            total_pages: Page count reported by page 1
            endpoint_id: Identifier used in telemetry

        Returns:
            Batches in execution order; each batch lists pages in ascending order.
            Empty when ``total_pages <= 1``.
        """
        if total_pages <= 1:
            return []

        size = self._policy.max_concurrency
        remaining = list(range(2, total_pages + 1))
        batches = [
            [
                PagePlan(page=page, limit=self._policy.page_size, batch_index=offset // size + 1)
                for page in remaining[offset : offset + size]
            ]
            for offset in range(0, len(remaining), size)
        ]

        log_page_plan(
            endpoint_id=endpoint_id,
            total_pages=total_pages,
            total_batches=len(batches),
            max_concurrency=size,
        )
        return batches
