"""
Result enrichment.

Converts raw Google search responses into the structured, LLM-friendly
SearchResults shape: cleaned titles and snippets, position-based relevance,
page metadata and a one-line summary.
"""

import logging

from ..types import (
    EnrichedResult,
    GoogleSearchItem,
    GoogleSearchResponse,
    ResultMetadata,
    SearchResults,
)
from ..utils import WHITESPACE_RE, collapse_whitespace

logger = logging.getLogger("efficient_search.enricher")

# Applied in order
TITLE_ENTITIES = [
    ("&quot;", '"'),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&nbsp;", " "),
]


class ResultEnricher:
    """Turns raw provider output into enriched search results."""

    def enrich(
        self, query: str, response: GoogleSearchResponse, cached: bool = False
    ) -> SearchResults:
        """
        Enrich a Google search response for LLM consumption.

        Args:
            query: The query the response answers
            response: Raw Google search response
            cached: Whether these results are being served from cache

        Returns:
            Complete SearchResults object
        """
        items = response.get("items") or []
        enriched_results = [
            self.enrich_item(item, index, len(items))
            for index, item in enumerate(items)
        ]

        search_information = response.get("searchInformation") or {}
        total_results = self.parse_total_results(
            search_information.get("totalResults")
        )
        search_time = self.parse_search_time(search_information.get("searchTime"))

        return SearchResults(
            query=query,
            total_results=total_results,
            search_time=search_time,
            results=enriched_results,
            summary=self.generate_summary(query, enriched_results, total_results),
            cached=cached,
        )

    def enrich_item(
        self, item: GoogleSearchItem, index: int, total: int
    ) -> EnrichedResult:
        """
        Enrich a single search result.

        Relevance is position based: the first result scores 1.0 and each later
        result drops by 1/total.
        """
        display_url = item.get("displayLink") or ""

        return EnrichedResult(
            title=self.clean_title(item.get("title") or ""),
            url=item.get("link") or "",
            snippet=self.clean_snippet(item.get("snippet") or ""),
            display_url=display_url,
            relevance=1 - index / total,
            metadata=self.extract_metadata(item, display_url),
        )

    def extract_metadata(
        self, item: GoogleSearchItem, display_url: str
    ) -> ResultMetadata:
        """Pull optional page metadata from the item's pagemap."""
        pagemap = item.get("pagemap") or {}
        metatags = (pagemap.get("metatags") or [{}])[0]

        candidates = {
            "description": metatags.get("og:description")
            or metatags.get("description"),
            "author": metatags.get("author") or metatags.get("article:author"),
            "published_date": metatags.get("article:published_time")
            or metatags.get("datePublished"),
            "thumbnail": _first_src(pagemap.get("cse_thumbnail"))
            or _first_src(pagemap.get("cse_image")),
            "site_name": metatags.get("og:site_name") or display_url,
        }

        return ResultMetadata(
            **{field: value for field, value in candidates.items() if value}
        )

    @staticmethod
    def clean_title(title: str) -> str:
        """Decode common HTML entities and normalize whitespace."""
        for entity, literal in TITLE_ENTITIES:
            title = title.replace(entity, literal)
        return collapse_whitespace(title)

    @staticmethod
    def clean_snippet(snippet: str) -> str:
        """Decode non-breaking spaces, normalize whitespace, drop a trailing ellipsis."""
        snippet = WHITESPACE_RE.sub(" ", snippet.replace("&nbsp;", " "))
        return snippet.removesuffix("...").strip()

    @staticmethod
    def parse_total_results(value: str | int | None) -> int:
        """
        Parse Google's textual total result count.

        Google sends the count as a string, sometimes comma grouped. Anything
        unparseable is treated as zero rather than failing the whole search.
        """
        if value is None:
            return 0

        try:
            return max(int(str(value).replace(",", "").strip()), 0)
        except ValueError:
            logger.warning(f"Unparseable totalResults value: {value!r}")
            return 0

    @staticmethod
    def parse_search_time(value: str | float | None) -> float:
        """Parse Google's search time in seconds, falling back to zero."""
        if value is None:
            return 0.0

        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"Unparseable searchTime value: {value!r}")
            return 0.0

    @staticmethod
    def generate_summary(
        query: str, results: list[EnrichedResult], total_results: int
    ) -> str:
        """Generate an LLM-friendly one-line summary of the search results."""
        if not results:
            return f'No results found for "{query}"'

        top_result = results[0]

        summary_parts = [
            f'Found {total_results:,} results for "{query}".',
            f"Showing top {len(results)}.",
            f"Most relevant: {top_result['title']} ({top_result['display_url']})",
        ]
        return " ".join(summary_parts)


def _first_src(images: list[dict[str, str]] | None) -> str | None:
    if not images:
        return None
    return images[0].get("src")
