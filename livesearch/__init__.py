"""Live Search client core.

Turns storefront search and category-browse intent into Live Search
GraphQL requests and post-processes the responses for display.

This package provides:
- LiveSearchClient for product search, attribute metadata and product refinement
- Default visibility / in-stock filter assembly
- Size facet ordering
- Filter selection helpers and sort options built from attribute metadata
- Telemetry sinks reporting search lifecycle to the storefront data layer
"""

from livesearch.client import LiveSearchClient
from livesearch.config import Settings, configure_logging
from livesearch.exceptions import LiveSearchError, SearchDecodeError, SearchTransportError
from livesearch.facets import normalize_size_facet
from livesearch.filters import (
    assemble_filters,
    count_selected,
    remove_filter,
    toggle_filter_option,
)
from livesearch.headers import build_headers
from livesearch.models import (
    EqualityFilter,
    InclusionFilter,
    QueryContext,
    RangeBounds,
    RangeFilter,
    SearchQuery,
    SortClause,
    SortDirection,
    StoreIdentity,
)
from livesearch.sorting import (
    SortOption,
    default_sort,
    parse_sort_option,
    sort_options_from_metadata,
)
from livesearch.telemetry import (
    SEARCH_UNIT_ID,
    NullTelemetrySink,
    StorefrontTelemetrySink,
    TelemetrySink,
)

__version__ = "0.1.0"
