"""
Query session for the search assistant: current query and search history.
"""
import logging
from typing import List, Optional

from config import SEARCH_CONFIG

logger = logging.getLogger(__name__)

class QuerySession:
    """Holds the current query and a bounded, deduplicated search history."""

    def __init__(self, history_limit: Optional[int] = None, recent_limit: Optional[int] = None):
        """
        Initialize the query session.

        Args:
            history_limit: Maximum number of distinct history entries (default: 50)
            recent_limit: Number of entries returned by recent_queries (default: 5)
        """
        self.history_limit = SEARCH_CONFIG["history_limit"] if history_limit is None else history_limit
        self.recent_limit = SEARCH_CONFIG["recent_limit"] if recent_limit is None else recent_limit

        self.current_query = ""
        self._history: List[str] = []

    @property
    def history(self) -> List[str]:
        """Search history, oldest first."""
        return list(self._history)

    @property
    def has_searched(self) -> bool:
        return len(self.current_query) > 0

    def set_query(self, query: str):
        """Store the query verbatim as the current query."""
        self.current_query = query

    def add_to_history(self, query: str):
        """
        Add a query to the search history.

        The query is trimmed. Blank queries and queries already present are
        ignored; repeats do not move an entry. The oldest entry is evicted
        once the limit is exceeded.

        Args:
            query: The query text
        """
        trimmed = query.strip()
        if not trimmed or trimmed in self._history:
            return

        self._history.append(trimmed)

        if len(self._history) > self.history_limit:
            evicted = len(self._history) - self.history_limit
            self._history = self._history[evicted:]
            logger.debug(f"Evicted {evicted} oldest history entries")

    def recent_queries(self) -> List[str]:
        """Return the most recent history entries, newest first."""
        start = max(0, len(self._history) - self.recent_limit)
        return list(reversed(self._history[start:]))

    def clear_history(self):
        self._history = []
        logger.info("Cleared search history")
