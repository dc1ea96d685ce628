"""Unit tests for LeadFilter."""

from datetime import date

import pytest
from pydantic import ValidationError

from reportkit.sync.core import SortDirection
from reportkit.sync.models import LeadFilter


class TestLeadFilter:
    """Test validation and query serialization."""

    def test_empty_filter_params(self):
        """Test an empty filter only carries page and limit."""
        assert LeadFilter().to_query_params(1, 100) == {"page": "1", "limit": "100"}

    def test_full_filter_params(self):
        """Test every constraint maps onto its query parameter."""
        filter = LeadFilter(
            status=("new", "contacted"),
            owner=("u1",),
            search="acme",
            date_from=date(2026, 1, 1),
            date_to=date(2026, 1, 31),
            sort_by="createdAt",
            sort_dir=SortDirection.DESC,
            lead_source="referral",
        )

        assert filter.to_query_params(3, 100) == {
            "page": "3",
            "limit": "100",
            "status": "new,contacted",
            "owner": "u1",
            "search": "acme",
            "sortBy": "createdAt",
            "sortDir": "desc",
            "from": "2026-01-01",
            "to": "2026-01-31",
            "leadSource": "referral",
        }

    def test_list_input_coerced_to_tuple(self):
        """Test list values are accepted and stored as tuples."""
        filter = LeadFilter(status=["new"])

        assert filter.status == ("new",)

    def test_string_inputs_parsed(self):
        """Test ISO dates and sort direction strings are parsed."""
        filter = LeadFilter(date_from="2026-02-01", sort_dir="asc")

        assert filter.date_from == date(2026, 2, 1)
        assert filter.sort_dir is SortDirection.ASC

    def test_filter_is_frozen(self):
        filter = LeadFilter(search="acme")

        with pytest.raises(ValidationError):
            filter.search = "other"

    def test_invalid_date_range(self):
        """Test date_from after date_to is rejected."""
        with pytest.raises(ValidationError, match="date_from must be <= date_to"):
            LeadFilter(date_from=date(2026, 2, 1), date_to=date(2026, 1, 1))

    @pytest.mark.parametrize("search", ["", "   "])
    def test_blank_search_means_no_search(self, search):
        """Test an empty search box is accepted and left out of the query."""
        filter = LeadFilter(search=search)

        assert not filter.search
        assert "search" not in filter.to_query_params(1, 100)

    def test_invalid_sort_direction(self):
        with pytest.raises(ValidationError):
            LeadFilter(sort_dir="sideways")

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError, match="page must be >= 1"):
            LeadFilter().to_query_params(0, 100)

    def test_filters_hashable_and_equal(self):
        """Test equal filters compare and hash equal."""
        assert LeadFilter(status=("new",)) == LeadFilter(status=["new"])
        assert hash(LeadFilter(status=("new",))) == hash(LeadFilter(status=("new",)))
