"""Pydantic models for Live Search requests.

Attributes are snake_case; fields whose upstream GraphQL name differs carry
a camelCase (or reserved-word) alias and are serialized by alias.
Responses are not modelled: operations return the decoded ``data`` payload.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Store Identity
# ============================================================================


class StoreIdentity(BaseModel):
    """Environment and store scope a request is issued for."""

    model_config = ConfigDict(frozen=True)

    environment_id: str = Field(..., description="Commerce Services environment ID")
    website_code: str = Field(..., description="Website code")
    store_code: str = Field(..., description="Store code")
    store_view_code: str = Field(..., description="Store view code")
    api_key: str = Field(..., description="Live Search API key")
    customer_group: str = Field(default="", description="Customer group code")


# ============================================================================
# Filters
# ============================================================================


class _WireModel(BaseModel):
    """Base for models sent as GraphQL variables."""

    model_config = ConfigDict(populate_by_name=True)

    def to_variables(self) -> dict[str, Any]:
        """Serialize to the GraphQL variable shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class InclusionFilter(_WireModel):
    """Match products whose attribute has any of the given values."""

    attribute: str
    in_: list[str] = Field(..., alias="in")


class RangeBounds(_WireModel):
    """Inclusive numeric bounds; either side may be open."""

    from_: float | None = Field(None, alias="from")
    to: float | None = None


class RangeFilter(_WireModel):
    """Match products whose numeric attribute falls within bounds."""

    attribute: str
    range: RangeBounds


class EqualityFilter(_WireModel):
    """Match products whose attribute equals a single value."""

    attribute: str
    eq: str


SearchFilter = InclusionFilter | RangeFilter | EqualityFilter


# ============================================================================
# Sorting and Context
# ============================================================================


class SortDirection(str, Enum):
    """Sort directions accepted by the service."""

    ASC = "ASC"
    DESC = "DESC"


class SortClause(_WireModel):
    """Sort by one attribute in one direction."""

    attribute: str
    direction: SortDirection


class ViewHistoryEntry(_WireModel):
    """A product the shopper viewed earlier in the session."""

    sku: str
    date_time: str = Field(..., alias="dateTime")


class QueryContext(_WireModel):
    """Shopper context used for personalization and pricing."""

    customer_group: str = Field(default="", alias="customerGroup")
    user_view_history: list[ViewHistoryEntry] = Field(
        default_factory=list, alias="userViewHistory"
    )


# ============================================================================
# Search Query
# ============================================================================


class SearchQuery(BaseModel):
    """A product search or category browse request.

    ``display_out_of_stock`` keeps the storefront's string flag: only the
    literal ``"1"`` includes out-of-stock products. Booleans are rejected,
    so callers holding a bool must stringify it first.
    """

    phrase: str | None = None
    page_size: int = Field(default=24, ge=1)
    current_page: int = Field(default=1, ge=1)
    filter: list[SearchFilter] = Field(default_factory=list)
    sort: list[SortClause] = Field(default_factory=list)
    context: QueryContext | None = None
    category_search: bool = False
    display_out_of_stock: str | None = None
