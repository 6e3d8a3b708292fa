"""Sort options for search results.

Sort options are exposed to shoppers as ``"<attribute>_<DIRECTION>"``
values built from the service's sortable attribute metadata, and turned
back into GraphQL sort clauses when a search is sent.
"""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from livesearch.filters import IN_STOCK_ATTRIBUTE, in_stock_only
from livesearch.models import SortClause, SortDirection

RELEVANCE_SORT = "relevance_DESC"
POSITION_SORT = "position_ASC"


class SortOption(BaseModel):
    """A selectable sort order."""

    label: str
    value: str


def default_sort_value(category_search: bool) -> str:
    """Sort value used before the shopper picks one."""
    return POSITION_SORT if category_search else RELEVANCE_SORT


def parse_sort_option(value: str | None) -> list[SortClause]:
    """Turn a ``"<attribute>_<DIRECTION>"`` value into sort clauses.

    The attribute itself may contain underscores, so the value is split on
    the last one. Empty values and unknown directions yield no clauses.
    """
    if not value or "_" not in value:
        return []
    attribute, _, direction = value.rpartition("_")
    if not attribute or direction not in SortDirection.__members__:
        return []
    return [SortClause(attribute=attribute, direction=SortDirection(direction))]


def default_sort(category_search: bool) -> list[SortClause]:
    """Sort clauses for a search the shopper has not sorted."""
    return parse_sort_option(default_sort_value(category_search))


def sort_options_from_metadata(
    sortable: Iterable[dict[str, Any]] | None,
    display_out_of_stock: str | None = None,
    category_search: bool = False,
) -> list[SortOption]:
    """Build the sort options offered for a result list.

    Args:
        sortable: ``attributeMetadata.sortable`` entries
            (``attribute``, ``label``, ``numeric``).
        display_out_of_stock: Storefront flag; stock sorting is hidden in
            stock-only mode.
        category_search: True when browsing a category.

    Returns:
        "Most Relevant" first, then ascending/descending pairs per attribute.
    """
    options = [SortOption(label="Most Relevant", value=default_sort_value(category_search))]
    hide_stock = in_stock_only(display_out_of_stock)

    for entry in sortable or []:
        attribute = entry.get("attribute") or ""
        if not attribute or "relevance" in attribute or "position" in attribute:
            continue
        if IN_STOCK_ATTRIBUTE in attribute and hide_stock:
            continue

        if entry.get("numeric") and "price" in attribute:
            options.append(SortOption(label="Price: Low to High", value=f"{attribute}_ASC"))
            options.append(SortOption(label="Price: High to Low", value=f"{attribute}_DESC"))
        else:
            label = entry.get("label") or attribute
            options.append(SortOption(label=f"{label}: Ascending", value=f"{attribute}_ASC"))
            options.append(SortOption(label=f"{label}: Descending", value=f"{attribute}_DESC"))

    return options
