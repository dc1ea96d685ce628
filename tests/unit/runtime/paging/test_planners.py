"""Unit tests for page planning logic."""

from __future__ import annotations

import pytest

from reportkit.sync.config import BulkFetchConfig
from reportkit.sync.runtime.paging import PagePlanner, PagePolicy


class TestPagePlanner:
    """Test PagePlanner functionality."""

    def test_first_page(self):
        """Test the discovery request is page 1 with the policy page size."""
        planner = PagePlanner(PagePolicy(page_size=100, max_concurrency=3))

        plan = planner.first_page()

        assert plan.page == 1
        assert plan.limit == 100
        assert plan.batch_index == 0

    @pytest.mark.parametrize("total_pages", [0, 1])
    def test_no_batches_for_single_page(self, total_pages):
        """Test nothing is planned when page 1 is the only page."""
        planner = PagePlanner(PagePolicy(page_size=100, max_concurrency=3))

        assert planner.plan_remaining(total_pages) == []

    def test_remaining_pages_split_into_bounded_batches(self):
        """Test pages 2..8 split into batches of at most 3."""
        planner = PagePlanner(PagePolicy(page_size=50, max_concurrency=3))

        batches = planner.plan_remaining(8)

        assert [[p.page for p in batch] for batch in batches] == [[2, 3, 4], [5, 6, 7], [8]]
        assert [batch[0].batch_index for batch in batches] == [1, 2, 3]
        assert all(p.limit == 50 for batch in batches for p in batch)

    def test_two_remaining_pages_form_one_batch(self):
        """Test 3 pages with K=3 give a single batch [2, 3]."""
        planner = PagePlanner(PagePolicy(page_size=100, max_concurrency=3))

        batches = planner.plan_remaining(3)

        assert [[p.page for p in batch] for batch in batches] == [[2, 3]]

    def test_policy_from_config(self):
        """Test PagePolicy mirrors BulkFetchConfig."""
        policy = PagePolicy.from_config(BulkFetchConfig(page_size=25, max_concurrency=5))

        assert policy.page_size == 25
        assert policy.max_concurrency == 5

    @pytest.mark.parametrize("page_size,max_concurrency", [(0, 3), (100, 0), (-1, 1)])
    def test_policy_rejects_non_positive_values(self, page_size, max_concurrency):
        """Test invalid policies raise ValueError."""
        with pytest.raises(ValueError):
            PagePolicy(page_size=page_size, max_concurrency=max_concurrency)
