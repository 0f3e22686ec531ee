"""
Error types raised by the search tools.

Every error here is reported back to the calling model as an ``{"error": ...}``
payload instead of crashing the server.
"""


class SearchToolError(Exception):
    """Base class for errors surfaced to the tool caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProviderError(SearchToolError):
    """The upstream search API failed or returned a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(SearchToolError):
    """Tool input was missing or invalid."""


class UnknownToolError(SearchToolError):
    """The requested tool name is not one we serve."""
