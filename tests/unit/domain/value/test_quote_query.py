"""Unit tests for QuoteQuery parameter coercion."""

import pytest

from quotevote.domain.value import QuoteFilter, QuoteQuery, QuoteSortField, SortOrder
from quotevote.domain.value.query import MAX_OFFSET


class TestQuoteQueryFromParams:
    """Tests for QuoteQuery.from_params."""

    def test_defaults(self):
        """No parameters should give page 1, limit 10, upvotes desc."""
        query = QuoteQuery.from_params()

        assert query.page == 1
        assert query.limit == 10
        assert query.search is None
        assert query.sort_by is QuoteSortField.UPVOTES
        assert query.order is SortOrder.DESC
        assert query.filter is None
        assert query.offset == 0

    def test_numeric_strings_are_parsed(self):
        query = QuoteQuery.from_params(page="3", limit="20")

        assert query.page == 3
        assert query.limit == 20
        assert query.offset == 40

    @pytest.mark.parametrize("raw", ["abc", "0", "-2", "", "1.5", 0, -1, True])
    def test_invalid_page_and_limit_fall_back_to_defaults(self, raw):
        """Non-numeric, zero or negative values should never error."""
        query = QuoteQuery.from_params(page=raw, limit=raw)

        assert query.page == 1
        assert query.limit == 10

    @pytest.mark.parametrize("raw", ["100000000000000000000", 10**30, "9" * 5000])
    def test_huge_page_falls_back_to_default(self, raw):
        """A page whose offset can't be expressed in SQL is treated as invalid."""
        query = QuoteQuery.from_params(page=raw, limit="10")

        assert query.page == 1
        assert query.offset == 0

    def test_largest_representable_page_is_kept(self):
        page = MAX_OFFSET // 10 + 1

        query = QuoteQuery.from_params(page=page, limit=10)

        assert query.page == page
        assert query.offset <= MAX_OFFSET

    def test_limit_is_clamped(self):
        query = QuoteQuery.from_params(limit="5000", max_limit=100)

        assert query.limit == 100

    def test_custom_defaults(self):
        query = QuoteQuery.from_params(default_page=2, default_limit=25)

        assert query.page == 2
        assert query.limit == 25

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("upvotes", QuoteSortField.UPVOTES),
            ("downvotes", QuoteSortField.DOWNVOTES),
            ("createdAt", QuoteSortField.CREATED_AT),
            ("popularity", QuoteSortField.UPVOTES),
            (None, QuoteSortField.UPVOTES),
        ],
    )
    def test_sort_field(self, raw, expected):
        """Known sort fields are kept, unknown ones fall back to upvotes."""
        assert QuoteQuery.from_params(sort_by=raw).sort_by is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("asc", SortOrder.ASC), ("desc", SortOrder.DESC), ("up", SortOrder.DESC)],
    )
    def test_sort_order(self, raw, expected):
        assert QuoteQuery.from_params(order=raw).order is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("voted", QuoteFilter.VOTED),
            ("not_voted", QuoteFilter.NOT_VOTED),
            ("mine", None),
            (None, None),
        ],
    )
    def test_filter(self, raw, expected):
        """Unknown filters are ignored."""
        assert QuoteQuery.from_params(filter=raw).filter is expected

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_search_is_ignored(self, raw):
        assert QuoteQuery.from_params(search=raw).search is None

    def test_search_is_trimmed(self):
        assert QuoteQuery.from_params(search="  hope ").search == "hope"

    def test_created_at_sorts_by_created_at_attribute(self):
        assert QuoteSortField.CREATED_AT.attribute == "created_at"
        assert QuoteSortField.UPVOTES.attribute == "upvotes"
