"""Facet post-processing for search responses.

The service returns size buckets ordered by count. Shoppers expect sizes in
garment order, so the size facet's buckets are re-sorted against a fixed
ordering table while the facet keeps its place in the facet list.
"""

from collections.abc import Sequence
from typing import Any

SIZE_ATTRIBUTE = "size"

# Smallest first.
SIZE_ORDER: tuple[str, ...] = (
    "Único", "U", "XPP", "PP", "P", "M", "G", "GG", "GG1", "GG2", "GG3", "EGG",
    "34", "36", "38", "40", "42", "44", "46", "48", "50", "52", "54", "56",
)

_SIZE_RANK = {label: index for index, label in enumerate(SIZE_ORDER)}


def size_rank(title: str | None) -> int:
    """Position of a size label in the ordering table.

    Unknown labels rank just past the largest known size.
    """
    return _SIZE_RANK.get(title, len(SIZE_ORDER))


def sort_size_buckets(buckets: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
    """Sort buckets by size rank; unknown sizes keep their relative order."""
    return sorted(buckets, key=lambda bucket: size_rank(bucket.get("title")))


def normalize_size_facet(facets: Sequence[dict[str, Any]]) -> Sequence[dict[str, Any]]:
    """Order the size facet's buckets without moving the facet.

    Only the first facet with attribute ``"size"`` is processed; any later
    size facet is passed through untouched. The input list, facets and
    buckets are never mutated.

    Args:
        facets: Facets as returned by ``productSearch``.

    Returns:
        The input itself when there is no size facet, otherwise a new list
        of the same length with the sorted size facet at its original index.
    """
    for index, facet in enumerate(facets):
        if facet.get("attribute") == SIZE_ATTRIBUTE:
            break
    else:
        return facets

    ordered = {**facet, "buckets": sort_size_buckets(facet.get("buckets") or [])}
    return [*facets[:index], ordered, *facets[index + 1:]]
