"""
Simulated search backend.

Stands in for a real search API: every call waits for a configured latency
and returns randomly generated people. Nothing here talks to the network.
"""
import asyncio
import logging
import random
from typing import Awaitable, Callable, List, Optional

from config import BACKEND_CONFIG, SEARCH_CONFIG
from models.errors import BackendFailureError
from models.results import SearchResponse, SearchResult, UploadResult

logger = logging.getLogger(__name__)

GENDERS = ["Male", "Female"]
MARITAL_STATUSES = ["Single", "Married", "Divorced"]
LOCATIONS = ["California", "New York", "Texas", "Florida", "Illinois", "Virginia"]

class MockSearchBackend:
    """In-process stand-in for the search API."""

    def __init__(self,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
                 search_latency: Optional[float] = None,
                 upload_latency: Optional[float] = None):
        """
        Initialize the mock backend.

        Args:
            rng: Random source for generated data
            sleep: Coroutine used to simulate latency; tests pass a fake clock
            search_latency: Seconds per search call (default: 0.5)
            upload_latency: Seconds per upload call (default: 1.0)
        """
        self.rng = rng or random.Random()
        self.sleep = sleep
        self.search_latency = BACKEND_CONFIG["search_latency"] if search_latency is None else search_latency
        self.upload_latency = BACKEND_CONFIG["upload_latency"] if upload_latency is None else upload_latency
        self.failure_query = BACKEND_CONFIG["failure_query"]

    async def search(self, query: str, page: int = 1, page_size: Optional[int] = None) -> SearchResponse:
        """
        Return one page of generated results.

        Args:
            query: Sanitized query
            page: 1-based page number
            page_size: Results per page (default: configured page size)

        Returns:
            The page, a random total in the configured range and has_more

        Raises:
            BackendFailureError: for the configured failure query
        """
        page_size = page_size or SEARCH_CONFIG["page_size"]

        await self.sleep(self.search_latency)

        if query == self.failure_query:
            logger.warning(f"Simulated backend failure for query: {query!r}")
            raise BackendFailureError("API Error")

        total_results = self.rng.randint(
            BACKEND_CONFIG["min_total_results"],
            BACKEND_CONFIG["max_total_results"]
        )
        results = self._generate_page(page, page_size)

        logger.debug(f"Mock search for {query!r}: page={page}, total={total_results}")
        return SearchResponse(
            query=query,
            results=results,
            total_results=total_results,
            has_more=page * page_size < total_results
        )

    async def upload(self, filename: str) -> UploadResult:
        """Simulate a file upload. The message always names the file."""
        await self.sleep(self.upload_latency)
        return UploadResult(
            success=True,
            message=f'File "{filename}" uploaded successfully'
        )

    def _generate_page(self, page: int, page_size: int) -> List[SearchResult]:
        offset = (page - 1) * page_size
        return [
            SearchResult(
                id=offset + i + 1,
                name=f"Johnson Smith {offset + i + 1}",
                age=self.rng.randint(20, 69),
                gender=self.rng.choice(GENDERS),
                marital_status=self.rng.choice(MARITAL_STATUSES),
                location=self.rng.choice(LOCATIONS),
                rating=round(self.rng.random() * 5, 1),
                references=self.rng.randint(0, 99),
                companies=self.rng.randint(0, 9),
                contacts=self.rng.randint(0, 49)
            )
            for i in range(page_size)
        ]
