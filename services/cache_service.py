"""
Result cache: remembers the last non-zero result total for display.
"""
import logging

logger = logging.getLogger(__name__)

def display_total(live_total: int, last_nonzero_total: int, is_loading: bool) -> int:
    """
    Returns the total-result count to show the user.

    While a refetch is in flight the live total is reset to zero; showing
    that would flash a misleading "0 results". During loading, a zero live
    total is replaced by the last non-zero total seen this session.

    Args:
        live_total: Total from the current pagination state
        last_nonzero_total: Last total greater than zero, or 0 if none yet
        is_loading: Whether a fetch is in flight

    Returns:
        The total to display
    """
    if is_loading and live_total == 0 and last_nonzero_total > 0:
        return last_nonzero_total
    return live_total

class ResultCache:
    """Holds the last successfully retrieved non-zero total."""

    def __init__(self):
        self.last_nonzero_total = 0

    def remember(self, total_results: int):
        """Record a total. Zero and negative totals are ignored."""
        if total_results > 0:
            self.last_nonzero_total = total_results
            logger.debug(f"Remembered total results: {total_results}")

    def display_total(self, live_total: int, is_loading: bool) -> int:
        return display_total(live_total, self.last_nonzero_total, is_loading)

    def reset(self):
        self.last_nonzero_total = 0
