"""
Results ordering component for the filter pipeline.
"""
import logging
from typing import List

from models.filters import SortField, SortOrder
from models.results import SearchResult

logger = logging.getLogger(__name__)

SORT_KEYS = {
    "name": lambda r: r.name.lower(),
    "age": lambda r: r.age,
    "rating": lambda r: r.rating,
}

def sort_results(results: List[SearchResult],
                 sort_by: SortField = "relevance",
                 sort_order: SortOrder = "desc") -> List[SearchResult]:
    """
    Sorts results by the selected key.

    Relevance keeps the backend order. The sort is stable in both
    directions: results with equal keys keep their relative order.

    Args:
        results: Results to order
        sort_by: Field to sort on
        sort_order: "asc" or "desc"

    Returns:
        A new, ordered list
    """
    if sort_by == "relevance":
        return list(results)

    key = SORT_KEYS[sort_by]
    # reverse=True on sorted() is still stable for equal keys
    ordered = sorted(results, key=key, reverse=(sort_order == "desc"))
    logger.debug(f"Sorted {len(ordered)} results by {sort_by} ({sort_order})")
    return ordered
