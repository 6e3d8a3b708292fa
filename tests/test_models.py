"""Tests for request models and settings."""

import pytest
from pydantic import ValidationError

from livesearch.config import Settings
from livesearch.models import (
    EqualityFilter,
    InclusionFilter,
    RangeFilter,
    SearchQuery,
    StoreIdentity,
)


class TestSearchQuery:
    """Tests for SearchQuery validation."""

    def test_defaults(self):
        query = SearchQuery()

        assert query.phrase is None
        assert query.page_size == 24
        assert query.current_page == 1
        assert query.filter == []
        assert query.sort == []
        assert query.category_search is False
        assert query.display_out_of_stock is None

    def test_filters_parsed_from_wire_shape(self):
        """Filter dicts are parsed into the matching filter type."""
        query = SearchQuery(
            filter=[
                {"attribute": "color", "in": ["Red"]},
                {"attribute": "price", "range": {"from": 10, "to": 20}},
                {"attribute": "brand", "eq": "Acme"},
            ]
        )

        assert isinstance(query.filter[0], InclusionFilter)
        assert isinstance(query.filter[1], RangeFilter)
        assert isinstance(query.filter[2], EqualityFilter)
        assert query.filter[1].to_variables() == {
            "attribute": "price",
            "range": {"from": 10.0, "to": 20.0},
        }

    def test_boolean_out_of_stock_flag_rejected(self):
        """The out-of-stock flag must be passed as a string."""
        with pytest.raises(ValidationError):
            SearchQuery(display_out_of_stock=True)

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            SearchQuery(page_size=0)

    def test_current_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            SearchQuery(current_page=0)


class TestStoreIdentity:
    """Tests for StoreIdentity."""

    def test_identity_is_frozen(self, identity):
        with pytest.raises(ValidationError):
            identity.api_key = "other"

    def test_customer_group_defaults_to_empty(self, identity):
        assert identity.customer_group == ""


class TestSettings:
    """Tests for Settings."""

    def test_environment_overrides(self, monkeypatch):
        """LIVESEARCH_* variables override defaults."""
        monkeypatch.setenv("LIVESEARCH_ENVIRONMENT_ID", "env-from-env")
        monkeypatch.setenv("LIVESEARCH_STORE_VIEW_CODE", "pt_br")
        monkeypatch.setenv("LIVESEARCH_REQUEST_TIMEOUT", "12.5")

        settings = Settings()

        assert settings.environment_id == "env-from-env"
        assert settings.request_timeout == 12.5
        identity = settings.store_identity()
        assert isinstance(identity, StoreIdentity)
        assert identity.store_view_code == "pt_br"
        assert identity.customer_group == ""
