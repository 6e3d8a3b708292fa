"""Tests for sort options."""

from livesearch.models import SortDirection
from livesearch.sorting import (
    default_sort,
    parse_sort_option,
    sort_options_from_metadata,
)


SORTABLE = [
    {"attribute": "relevance", "label": "Relevance", "numeric": True},
    {"attribute": "position", "label": "Position", "numeric": True},
    {"attribute": "price", "label": "Price", "numeric": True},
    {"attribute": "name", "label": "Product Name", "numeric": False},
    {"attribute": "inStock", "label": "In Stock", "numeric": False},
]


class TestParseSortOption:
    """Tests for parse_sort_option."""

    def test_simple_value(self):
        clauses = parse_sort_option("price_ASC")

        assert len(clauses) == 1
        assert clauses[0].attribute == "price"
        assert clauses[0].direction is SortDirection.ASC

    def test_attribute_with_underscore(self):
        """The value is split on the last underscore."""
        clauses = parse_sort_option("created_at_DESC")

        assert clauses[0].attribute == "created_at"
        assert clauses[0].direction is SortDirection.DESC

    def test_invalid_values(self):
        assert parse_sort_option(None) == []
        assert parse_sort_option("") == []
        assert parse_sort_option("price") == []
        assert parse_sort_option("price_UP") == []
        assert parse_sort_option("_ASC") == []

    def test_default_sort(self):
        assert default_sort(True)[0].to_variables() == {"attribute": "position", "direction": "ASC"}
        assert default_sort(False)[0].to_variables() == {"attribute": "relevance", "direction": "DESC"}


class TestSortOptionsFromMetadata:
    """Tests for sort_options_from_metadata."""

    def test_search_options_in_stock_only(self):
        """Stock sorting is hidden when only in-stock products are shown."""
        options = sort_options_from_metadata(SORTABLE)

        assert [(o.label, o.value) for o in options] == [
            ("Most Relevant", "relevance_DESC"),
            ("Price: Low to High", "price_ASC"),
            ("Price: High to Low", "price_DESC"),
            ("Product Name: Ascending", "name_ASC"),
            ("Product Name: Descending", "name_DESC"),
        ]

    def test_category_options_with_out_of_stock(self):
        """Category browse starts with position; stock sorting is offered."""
        options = sort_options_from_metadata(
            SORTABLE, display_out_of_stock="1", category_search=True
        )

        values = [o.value for o in options]
        assert values[0] == "position_ASC"
        assert "inStock_ASC" in values
        assert "inStock_DESC" in values

    def test_no_metadata(self):
        options = sort_options_from_metadata(None)

        assert [o.value for o in options] == ["relevance_DESC"]


class TestPackageExports:
    """Helpers are importable from the package root."""

    def test_helpers_exported(self):
        import livesearch
        from livesearch import filters, sorting

        assert livesearch.toggle_filter_option is filters.toggle_filter_option
        assert livesearch.remove_filter is filters.remove_filter
        assert livesearch.count_selected is filters.count_selected
        assert livesearch.SortOption is sorting.SortOption
        assert livesearch.parse_sort_option is sorting.parse_sort_option
        assert livesearch.default_sort is sorting.default_sort
        assert livesearch.sort_options_from_metadata is sorting.sort_options_from_metadata
