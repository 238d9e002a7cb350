"""
State definitions for the search assistant session engine.
"""
from typing import TypedDict

DEFAULT_PAGE_SIZE = 20

class Pagination(TypedDict):
    """
    Pagination cursor for the current result list.
    current_page only advances on a successful load-more.
    """
    current_page: int  # 1-based
    page_size: int
    total_results: int  # live total from the latest response
    has_more: bool

class LightboxState(TypedDict):
    """Snapshot of the promotional lightbox."""
    is_visible: bool
    current_item_url: str
    search_count: int  # every submission, regardless of outcome

def default_pagination(page_size: int = DEFAULT_PAGE_SIZE) -> Pagination:
    """Return a fresh pagination cursor."""
    return Pagination(
        current_page=1,
        page_size=page_size,
        total_results=0,
        has_more=False
    )
