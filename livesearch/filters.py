"""Filter assembly for product search requests.

Every search carries two default filters on top of the shopper's own:
a visibility scope and, unless out-of-stock products are displayed,
an in-stock restriction. Helpers here always return new lists and never
modify the caller's filters.
"""

from collections.abc import Sequence

from livesearch.models import (
    EqualityFilter,
    InclusionFilter,
    SearchFilter,
)

VISIBILITY_ATTRIBUTE = "visibility"
IN_STOCK_ATTRIBUTE = "inStock"
RESERVED_ATTRIBUTES = frozenset({VISIBILITY_ATTRIBUTE, IN_STOCK_ATTRIBUTE})

CATALOG_SCOPE = "Catalog"
SEARCH_SCOPE = "Search"
# Single compound label understood by the service, not two values.
CATALOG_AND_SEARCH_SCOPE = "Catalog, Search"

DISPLAY_OUT_OF_STOCK = "1"


def visibility_filter(category_search: bool) -> InclusionFilter:
    """Build the visibility filter for a category browse or keyword search."""
    scope = CATALOG_SCOPE if category_search else SEARCH_SCOPE
    return InclusionFilter(
        attribute=VISIBILITY_ATTRIBUTE,
        in_=[scope, CATALOG_AND_SEARCH_SCOPE],
    )


def in_stock_only(display_out_of_stock: str | None) -> bool:
    """Whether out-of-stock products must be excluded.

    Only the exact string ``"1"`` displays out-of-stock products; any other
    value, including ``None`` and ``"0"``, restricts results to stock.
    """
    return display_out_of_stock != DISPLAY_OUT_OF_STOCK


def assemble_filters(
    filters: Sequence[SearchFilter],
    category_search: bool,
    display_out_of_stock: str | None,
) -> list[SearchFilter]:
    """Derive the effective filter list sent with a search request.

    Caller filters on ``visibility`` or ``inStock`` are dropped; the
    defaults are the only filters on those attributes.

    Args:
        filters: Filters selected by the shopper.
        category_search: True when browsing a category, False for keyword search.
        display_out_of_stock: Storefront flag; ``"1"`` includes out-of-stock items.

    Returns:
        A new list: the caller's other filters, then the visibility filter,
        then the in-stock filter when applicable.
    """
    effective = [
        current for current in filters if current.attribute not in RESERVED_ATTRIBUTES
    ]
    effective.append(visibility_filter(category_search))
    if in_stock_only(display_out_of_stock):
        effective.append(EqualityFilter(attribute=IN_STOCK_ATTRIBUTE, eq="true"))
    return effective


def toggle_filter_option(
    filters: Sequence[SearchFilter],
    attribute: str,
    option: str,
) -> list[SearchFilter]:
    """Select or deselect one value of an inclusion filter.

    Deselecting the last value drops the filter. Selecting a value on an
    attribute with no filter yet adds a new inclusion filter at the end.

    Args:
        filters: Current filter selection.
        attribute: Facet attribute the option belongs to.
        option: Bucket value to toggle.

    Returns:
        The updated filter list.
    """
    updated: list[SearchFilter] = []
    found = False
    for current in filters:
        if current.attribute != attribute or not isinstance(current, InclusionFilter):
            updated.append(current)
            continue
        found = True
        if option in current.in_:
            values = [value for value in current.in_ if value != option]
        else:
            values = [*current.in_, option]
        if values:
            updated.append(InclusionFilter(attribute=attribute, in_=values))
    if not found:
        updated.append(InclusionFilter(attribute=attribute, in_=[option]))
    return updated


def remove_filter(filters: Sequence[SearchFilter], attribute: str) -> list[SearchFilter]:
    """Drop every filter on the given attribute."""
    return [current for current in filters if current.attribute != attribute]


def count_selected(filters: Sequence[SearchFilter]) -> int:
    """Count selected values: one per inclusion value, one per other filter."""
    total = 0
    for current in filters:
        if isinstance(current, InclusionFilter):
            total += len(current.in_)
        else:
            total += 1
    return total
