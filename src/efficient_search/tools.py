"""
Search Tools for MCP

Routes tool calls to the cache, the Google client and the result enricher.
One SearchTools instance is built at startup and shared by every tool call.
"""

import logging
from typing import Any, get_args

from .errors import SearchToolError, UnknownToolError, ValidationError
from .processing import ResultEnricher
from .search.cache import SearchCache
from .search.google_client import GoogleSearchClient, SafeSearch
from .settings import Settings
from .types import CacheStats, SearchResults
from .utils import get_error_payload

logger = logging.getLogger("efficient_search.tools")

MIN_RESULTS = 1
MAX_RESULTS = 10

TOOL_DESCRIPTIONS: dict[str, str] = {
    "web_search": (
        "Search the web using Google. Returns LLM-optimized results with "
        "titles, URLs, snippets, and metadata. Results are cached for efficiency."
    ),
    "clear_cache": "Clear the search results cache",
    "get_cache_stats": "Get cache statistics (size, TTL, max size)",
}


class SearchTools:
    """The web_search, clear_cache and get_cache_stats tool operations."""

    def __init__(
        self,
        cache: SearchCache,
        client: GoogleSearchClient,
        enricher: ResultEnricher | None = None,
        *,
        default_num: int = MAX_RESULTS,
    ):
        self.cache = cache
        self.client = client
        self.enricher = enricher or ResultEnricher()
        self.default_num = default_num

    async def web_search(
        self,
        query: str,
        num: int | None = None,
        safe: str | None = None,
        gl: str | None = None,
        lr: str | None = None,
    ) -> SearchResults:
        """
        Search the web, serving repeated queries from the cache.

        Args:
            query: The search query string
            num: Number of results to return (1-10)
            safe: Safe search level ("off", "medium" or "high")
            gl: Geolocation country code
            lr: Language restriction code

        Returns:
            Enriched search results; ``cached`` is True when served from cache

        Raises:
            ValidationError: If the query or an option is invalid
            ProviderError: If the Google API request fails
        """
        if not isinstance(query, str) or not query.strip():
            raise ValidationError("query is required")
        num = _validate_num(num)
        if safe is not None and safe not in get_args(SafeSearch):
            raise ValidationError(
                f"safe must be one of {', '.join(get_args(SafeSearch))}"
            )

        cached_results = self.cache.get(query)
        if cached_results is not None:
            return cached_results

        logger.info(f"🔍 Searching Google for: {query}")
        response = await self.client.search(
            query, num=num or self.default_num, safe=safe, gl=gl, lr=lr
        )
        results = self.enricher.enrich(query, response)

        self.cache.set(query, results)
        return results

    def clear_cache(self) -> dict[str, Any]:
        """Clear the search results cache."""
        self.cache.clear()
        return {"success": True, "message": "Cache cleared"}

    def get_cache_stats(self) -> CacheStats:
        """Get cache statistics."""
        return self.cache.get_stats()

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """
        Dispatch a tool call by name.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            The tool's JSON-serializable payload, or ``{"error": message}``
        """
        arguments = arguments or {}

        try:
            if name == "web_search":
                return dict(
                    await self.web_search(
                        arguments.get("query", ""),
                        num=arguments.get("num"),
                        safe=arguments.get("safe"),
                        gl=arguments.get("gl"),
                        lr=arguments.get("lr"),
                    )
                )
            elif name == "clear_cache":
                return self.clear_cache()
            elif name == "get_cache_stats":
                return dict(self.get_cache_stats())
            else:
                raise UnknownToolError(f"Unknown tool: {name}")

        except SearchToolError as e:
            logger.warning(f"❌ Tool {name} failed: {e.message}")
            return get_error_payload(e.message)
        except Exception as e:
            logger.exception(f"❌ Tool {name} failed unexpectedly")
            return get_error_payload(str(e))


def _validate_num(num: Any) -> int | None:
    if num is None:
        return None
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    if (
        isinstance(num, bool)
        or not isinstance(num, int)
        or not MIN_RESULTS <= num <= MAX_RESULTS
    ):
        raise ValidationError(
            f"num must be an integer between {MIN_RESULTS} and {MAX_RESULTS}"
        )
    return num


def create_search_tools(settings: Settings) -> SearchTools:
    """Build the cache, Google client and enricher from settings."""
    cache = SearchCache(
        ttl_minutes=settings.cache_ttl_minutes, max_size=settings.cache_max_size
    )
    client = GoogleSearchClient(
        settings.google_api_key,
        settings.search_engine_id,
        base_url=settings.google_search_base_url,
        max_results=settings.max_results,
        timeout=settings.request_timeout,
        max_retries=settings.max_retries,
    )
    return SearchTools(
        cache, client, ResultEnricher(), default_num=settings.max_results
    )
