"""
Helper functions for working with search results.
"""
from typing import Any, Dict, List

from models.results import SearchResult

def calculate_average_rating(results: List[SearchResult]) -> float:
    """Average rating rounded to two decimals, 0 for no results."""
    if not results:
        return 0
    return round(sum(r.rating for r in results) / len(results), 2)

def group_results_by_location(results: List[SearchResult]) -> Dict[str, List[SearchResult]]:
    groups: Dict[str, List[SearchResult]] = {}
    for result in results:
        groups.setdefault(result.location, []).append(result)
    return groups

def generate_results_summary(results: List[SearchResult]) -> Dict[str, Any]:
    """
    Summarises a result list.

    Returns:
        total, average age, average rating and up to three most common
        locations
    """
    if not results:
        return {
            "total": 0,
            "average_age": 0,
            "average_rating": 0,
            "top_locations": []
        }

    groups = group_results_by_location(results)
    # sorted() is stable, so ties keep first-seen order
    top_locations = sorted(groups, key=lambda loc: len(groups[loc]), reverse=True)[:3]

    return {
        "total": len(results),
        "average_age": round(sum(r.age for r in results) / len(results)),
        "average_rating": calculate_average_rating(results),
        "top_locations": top_locations
    }
