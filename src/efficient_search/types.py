"""
Common type definitions for efficient search.

TypedDict definitions for the raw Google payloads and the enriched results
handed back to the model.
"""

from typing import Any, TypedDict


class GoogleSearchInformation(TypedDict, total=False):
    """Timing and volume block of a Google search response."""

    searchTime: float
    formattedSearchTime: str
    totalResults: str
    formattedTotalResults: str


class GooglePageMap(TypedDict, total=False):
    """Structured page data Google attaches to a result item."""

    metatags: list[dict[str, str]]
    cse_thumbnail: list[dict[str, str]]
    cse_image: list[dict[str, str]]


class GoogleSearchItem(TypedDict, total=False):
    """Individual search result from the Google Custom Search API."""

    kind: str
    title: str
    htmlTitle: str
    link: str
    displayLink: str
    snippet: str
    htmlSnippet: str
    formattedUrl: str
    htmlFormattedUrl: str
    pagemap: GooglePageMap


class GoogleSearchResponse(TypedDict, total=False):
    """Raw response body from the Google Custom Search API."""

    kind: str
    url: dict[str, str]
    queries: dict[str, list[dict[str, Any]]]
    searchInformation: GoogleSearchInformation
    items: list[GoogleSearchItem]


class ResultMetadata(TypedDict, total=False):
    """Optional page metadata. Missing values are left out entirely."""

    description: str
    author: str
    published_date: str
    thumbnail: str
    site_name: str


class EnrichedResult(TypedDict):
    """Search result cleaned up for LLM consumption."""

    title: str
    url: str
    snippet: str
    display_url: str
    relevance: float
    metadata: ResultMetadata


class SearchResults(TypedDict):
    """Complete enriched result set for one query."""

    query: str
    total_results: int
    search_time: float
    results: list[EnrichedResult]
    summary: str
    cached: bool


class CacheStats(TypedDict):
    """Current cache occupancy and configuration."""

    size: int
    max_size: int
    ttl_minutes: float
