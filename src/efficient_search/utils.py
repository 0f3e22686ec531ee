"""
Utility functions for efficient search.

Small text helpers shared by the cache and the result enricher.
"""

import re
from typing import Any

WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """
    Collapse every run of whitespace to a single space and trim the ends.

    Args:
        text: The text to clean

    Returns:
        The text with normalized spacing
    """
    return WHITESPACE_RE.sub(" ", text).strip()


def get_error_payload(message: str) -> dict[str, Any]:
    """
    Create a standardized error response for a failed tool call.

    Args:
        message: Human readable error message

    Returns:
        Error response dictionary
    """
    return {"error": message}
