"""
Input validation components for search submission.
"""
import re
import logging
from typing import Optional

from config import SEARCH_CONFIG

logger = logging.getLogger(__name__)

# Regular expression patterns for validation
SCRIPT_INJECTION_PATTERN = r'(<script|javascript:)'
WHITESPACE_PATTERN = re.compile(r'\s+')

QUERY_TOO_LONG = "QUERY_TOO_LONG"
POTENTIALLY_HARMFUL_CONTENT = "POTENTIALLY_HARMFUL_CONTENT"

ERROR_MESSAGES = {
    QUERY_TOO_LONG: "Search query cannot exceed {max_length} characters",
    POTENTIALLY_HARMFUL_CONTENT: "Search query contains content that is not allowed",
}

def sanitize_query(query: str) -> str:
    """
    Normalizes a search query by trimming and collapsing whitespace.

    Args:
        query: The raw query text

    Returns:
        The sanitized query
    """
    return WHITESPACE_PATTERN.sub(" ", query.strip())

def validate_query(query: str, max_length: Optional[int] = None) -> Optional[str]:
    """
    Validates a sanitized search query.

    An empty query is not an error here; the caller treats it as a request
    to clear results.

    Args:
        query: The sanitized query
        max_length: Maximum allowed length, defaults to the configured limit

    Returns:
        An error code, or None if the query is acceptable
    """
    if max_length is None:
        max_length = SEARCH_CONFIG["max_query_length"]

    logger.debug(f"Validating query: {query!r}")

    if len(query) > max_length:
        logger.info(f"Query validation failed: Query too long ({len(query)} chars)")
        return QUERY_TOO_LONG

    if re.search(SCRIPT_INJECTION_PATTERN, query, re.IGNORECASE):
        logger.warning("Query validation failed: Potentially harmful content")
        return POTENTIALLY_HARMFUL_CONTENT

    return None

def validation_error_message(error_code: str, max_length: Optional[int] = None) -> str:
    """
    Returns the user-visible message for a validation error code.

    Args:
        error_code: Code returned by validate_query
        max_length: Length limit to mention in the message

    Returns:
        Message suitable for display
    """
    if max_length is None:
        max_length = SEARCH_CONFIG["max_query_length"]
    template = ERROR_MESSAGES.get(error_code, "Search query is not valid")
    return template.format(max_length=max_length)
