"""
Monitoring and metrics for the search session engine.
"""
import logging
import time
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

OUTCOMES = ["success", "invalid_query", "backend_failure", "empty", "ignored"]

class SearchSystemMonitor:
    """Record and summarise search submission outcomes."""

    def __init__(self):
        """Initialize the monitoring system."""
        logger.info("Initializing search system monitor")
        self.queries_processed = 0
        self.error_count = 0
        self.load_more_count = 0
        self.avg_response_time = 0
        self.outcome_distribution = {outcome: 0 for outcome in OUTCOMES}
        self.hourly_query_count = {}

    def log_search(self, query: str, outcome: str, execution_time: float = 0.0,
                   load_more: bool = False, error: Optional[str] = None):
        """
        Log a search submission.

        Args:
            query: The search query
            outcome: One of OUTCOMES
            execution_time: Time spent waiting on the backend, in seconds
            load_more: Whether this was a load-more fetch
            error: Error message, if any
        """
        self.queries_processed += 1
        if load_more:
            self.load_more_count += 1

        if error:
            self.error_count += 1

        self.outcome_distribution[outcome] = self.outcome_distribution.get(outcome, 0) + 1

        # Running average over every logged search
        self.avg_response_time = (
            (self.avg_response_time * (self.queries_processed - 1) + execution_time) /
            self.queries_processed
        )

        current_hour = time.strftime("%Y-%m-%d-%H")
        self.hourly_query_count[current_hour] = self.hourly_query_count.get(current_hour, 0) + 1

        logger.debug(f"Logged search metrics for query: '{query}', outcome: {outcome}, "
                     f"time: {execution_time:.2f}s")

    def get_system_health(self) -> Dict[str, Any]:
        """
        Get system health metrics.

        Returns:
            Dictionary of health metrics
        """
        return {
            "queries_processed": self.queries_processed,
            "load_more_count": self.load_more_count,
            "error_rate": self.error_count / max(1, self.queries_processed),
            "outcome_distribution": dict(self.outcome_distribution),
            "avg_response_time": self.avg_response_time
        }
