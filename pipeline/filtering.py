"""
Client-side filter pipeline for the current result list.
"""
import logging
from typing import List

from models.filters import (
    FilterCriteria,
    DEFAULT_MIN_RATING,
    DEFAULT_SORT_BY,
    DEFAULT_SORT_ORDER,
)
from models.results import SearchResult
from pipeline.results_ranking import sort_results

logger = logging.getLogger(__name__)

def passes_age(result: SearchResult, criteria: FilterCriteria) -> bool:
    # lower bound exclusive, upper bound inclusive
    return criteria.age_range.min < result.age <= criteria.age_range.max

def passes_location(result: SearchResult, criteria: FilterCriteria) -> bool:
    return not criteria.locations or result.location in criteria.locations

def passes_company(result: SearchResult, criteria: FilterCriteria) -> bool:
    # Results only carry a company count, so no named company can match.
    if criteria.companies:
        return False
    return True

def passes_rating(result: SearchResult, criteria: FilterCriteria) -> bool:
    return result.rating >= criteria.min_rating

def apply_filters(results: List[SearchResult], criteria: FilterCriteria) -> List[SearchResult]:
    """
    Applies the filter criteria to a result list.

    All predicates must pass. The surviving results are then sorted
    according to the criteria's sort settings.

    Args:
        results: The in-memory result list
        criteria: Current filter selection

    Returns:
        A new filtered and sorted list; the input is not modified
    """
    filtered = [
        result for result in results
        if passes_age(result, criteria)
        and passes_location(result, criteria)
        and passes_company(result, criteria)
        and passes_rating(result, criteria)
    ]

    logger.debug(f"Filtered {len(results)} results down to {len(filtered)}")
    return sort_results(filtered, criteria.sort_by, criteria.sort_order)

def _is_default_sort(criteria: FilterCriteria) -> bool:
    return criteria.sort_by == DEFAULT_SORT_BY and criteria.sort_order == DEFAULT_SORT_ORDER

def active_filter_count(criteria: FilterCriteria) -> int:
    """
    Counts criteria that differ from their defaults.

    Age range, locations, companies, rating and sorting each count once.
    """
    count = 0
    if not criteria.age_range.is_default():
        count += 1
    if criteria.locations:
        count += 1
    if criteria.companies:
        count += 1
    if criteria.min_rating > DEFAULT_MIN_RATING:
        count += 1
    if not _is_default_sort(criteria):
        count += 1
    return count

def has_active_filters(criteria: FilterCriteria) -> bool:
    """Return True when any criterion differs from its default."""
    return active_filter_count(criteria) > 0

def filter_summary(criteria: FilterCriteria) -> str:
    """
    Builds a one-line, human-readable summary of the active filters.

    Returns:
        e.g. "Age: 25-35, Location: New York, Min Rating: 4", or "" when
        nothing is active
    """
    summary = []

    if not criteria.age_range.is_default():
        summary.append(f"Age: {criteria.age_range.min}-{criteria.age_range.max}")

    if criteria.locations:
        summary.append(f"Location: {', '.join(criteria.locations)}")

    if criteria.companies:
        summary.append(f"Company: {', '.join(criteria.companies)}")

    if criteria.min_rating > DEFAULT_MIN_RATING:
        summary.append(f"Min Rating: {criteria.min_rating:g}")

    if not _is_default_sort(criteria):
        summary.append(f"Sort: {criteria.sort_by} ({criteria.sort_order})")

    return ", ".join(summary)
