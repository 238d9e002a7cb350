"""
Main search service: query submission, pagination and result state.
"""
import logging
import time
from typing import List, Optional

from config import SEARCH_CONFIG
from data.session import QuerySession
from models.errors import InvalidQueryError
from models.results import SearchResult
from models.state import Pagination, default_pagination
from pipeline.input_validation import sanitize_query, validate_query, validation_error_message
from services.cache_service import ResultCache
from services.lightbox_service import LightboxService
from services.mock_backend import MockSearchBackend
from utils.monitoring import SearchSystemMonitor

logger = logging.getLogger(__name__)

class SearchService:
    """
    Owns the search lifecycle for one application session.

    State machine: Idle -> Loading -> Idle, with the error field set when a
    fetch fails. At most one fetch is in flight; overlapping submissions and
    load-more calls are dropped, not queued. In-flight fetches cannot be
    cancelled.
    """

    def __init__(self,
                 backend: Optional[MockSearchBackend] = None,
                 query_session: Optional[QuerySession] = None,
                 result_cache: Optional[ResultCache] = None,
                 lightbox_service: Optional[LightboxService] = None,
                 monitor: Optional[SearchSystemMonitor] = None,
                 page_size: Optional[int] = None):
        """
        Initialize the search service.

        Args:
            backend: Search backend (default: MockSearchBackend)
            query_session: Current query and history
            result_cache: Remembers the last non-zero total
            lightbox_service: Trigger policy notified on every submission
            monitor: Receives one record per search
            page_size: Results per page (default: configured page size)
        """
        logger.info("Initializing search service")
        self.backend = backend or MockSearchBackend()
        self.query_session = query_session or QuerySession()
        self.result_cache = result_cache or ResultCache()
        self.lightbox_service = lightbox_service
        self.monitor = monitor or SearchSystemMonitor()
        self.page_size = page_size or SEARCH_CONFIG["page_size"]

        self.results: List[SearchResult] = []
        self.is_loading = False
        self.error: Optional[str] = None
        self.pagination: Pagination = default_pagination(self.page_size)

    @property
    def current_query(self) -> str:
        return self.query_session.current_query

    @property
    def has_results(self) -> bool:
        return len(self.results) > 0

    @property
    def display_total_results(self) -> int:
        """Total to show; never drops to 0 mid-refetch once a total was seen."""
        return self.result_cache.display_total(self.pagination["total_results"], self.is_loading)

    def set_loading(self, loading: bool):
        self.is_loading = loading

    def set_error(self, error_message: Optional[str]):
        self.error = error_message

    def set_results(self, results: List[SearchResult]):
        self.results = list(results)
        self.error = None

    def append_results(self, results: List[SearchResult]):
        self.results = self.results + list(results)

    def clear_results(self):
        self.results = []
        self.error = None

    def update_pagination(self, **updates):
        """
        Merge updates into the pagination state.

        A non-zero total_results is also remembered for display.
        """
        self.pagination = Pagination(**{**self.pagination, **updates})
        if "total_results" in updates:
            self.result_cache.remember(updates["total_results"])

    def reset_pagination(self, preserve_has_more: bool = False):
        """
        Reset pagination to page 1.

        Args:
            preserve_has_more: Keep the current has_more flag until new data
                arrives, so a "load more" control does not flicker
        """
        has_more = self.pagination["has_more"]
        self.pagination = default_pagination(self.page_size)
        if preserve_has_more:
            self.pagination["has_more"] = has_more

    async def submit(self, query: str) -> bool:
        """
        Submit a fresh search.

        Args:
            query: Raw query text from the user

        Returns:
            True if new results were fetched

        Raises:
            InvalidQueryError: if the query is too long or contains a script
                injection marker. The message is also stored in self.error.
        """
        # Counted on every submission, whatever happens next
        if self.lightbox_service is not None:
            self.lightbox_service.handle_search_action()

        sanitized_query = sanitize_query(query)

        error_code = validate_query(sanitized_query)
        if error_code:
            message = validation_error_message(error_code)
            self.set_error(message)
            self.monitor.log_search(sanitized_query, "invalid_query", error=message)
            raise InvalidQueryError(error_code, message)

        if not sanitized_query:
            self.clear_results()
            self.monitor.log_search(sanitized_query, "empty")
            return False

        if self.is_loading:
            logger.warning(f"Search already in progress, ignoring submission: '{sanitized_query}'")
            self.monitor.log_search(sanitized_query, "ignored")
            return False

        return await self._perform_search(sanitized_query, load_more=False)

    async def load_more_results(self) -> bool:
        """
        Fetch the next page for the current query.

        A no-op unless more results exist and no fetch is in flight.

        Returns:
            True if a page was appended
        """
        if not self.pagination["has_more"] or self.is_loading:
            logger.debug("Load more skipped: no more results or already loading")
            return False

        return await self._perform_search(self.current_query, load_more=True)

    async def _perform_search(self, query: str, load_more: bool) -> bool:
        """
        Execute one backend round-trip.

        Args:
            query: Sanitized query
            load_more: Append the next page instead of replacing results

        Returns:
            True on success
        """
        logger.info(f"Executing search for query: '{query}' (load_more={load_more})")
        self.set_loading(True)
        self.set_error(None)

        previous_pagination = Pagination(**self.pagination)
        previous_query = self.query_session.current_query
        if not load_more:
            self.query_session.set_query(query)
            self.reset_pagination(preserve_has_more=True)
            self.query_session.add_to_history(query)

        page = self.pagination["current_page"] + 1 if load_more else 1
        start_time = time.time()

        try:
            response = await self.backend.search(query, page=page, page_size=self.pagination["page_size"])

            if load_more:
                self.append_results(response.results)
            else:
                self.set_results(response.results)

            self.update_pagination(
                current_page=page,
                total_results=response.total_results,
                has_more=response.has_more
            )

            execution_time = time.time() - start_time
            logger.info(f"Search completed in {execution_time:.2f}s, "
                        f"{len(response.results)} results, total {response.total_results}")
            self.monitor.log_search(query, "success", execution_time, load_more=load_more)
            return True

        except Exception as e:
            # Previous results stay displayed; the query and pagination they belong to are restored
            execution_time = time.time() - start_time
            error_message = str(e) or "An error occurred during search"
            logger.error(f"Search failed: {error_message}")
            self.pagination = previous_pagination
            self.query_session.set_query(previous_query)
            self.set_error(error_message)
            self.monitor.log_search(query, "backend_failure", execution_time,
                                    load_more=load_more, error=error_message)
            return False

        finally:
            self.set_loading(False)
