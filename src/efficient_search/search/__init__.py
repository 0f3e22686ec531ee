"""
Search and Caching Package

Provides Google web search with in-memory result caching.
"""

from efficient_search.search.cache import SearchCache, normalize_query
from efficient_search.search.google_client import GoogleSearchClient

__all__ = ["GoogleSearchClient", "SearchCache", "normalize_query"]
