"""
Error types raised by the search session engine.
"""

class SearchAssistantError(Exception):
    """Base class for search assistant errors."""

class InvalidQueryError(SearchAssistantError):
    """The query was rejected before any fetch was issued."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

class BackendFailureError(SearchAssistantError):
    """The simulated backend rejected a fetch."""
