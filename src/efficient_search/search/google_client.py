import asyncio
import itertools
import logging
from typing import Literal

import httpx
from httpcore._async.connection import exponential_backoff

from ..errors import ProviderError
from ..types import GoogleSearchResponse

logger = logging.getLogger("efficient_search.google")

DEFAULT_BASE_URL = "https://www.googleapis.com/customsearch/v1"

SafeSearch = Literal["off", "medium", "high"]

# Statuses worth another attempt; everything else fails straight away
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class GoogleSearchClient:
    """Async client for the Google Programmable Search Engine JSON API."""

    def __init__(
        self,
        api_key: str,
        search_engine_id: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        max_results: int = 10,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.search_engine_id = search_engine_id
        self.base_url = base_url
        self.max_results = max_results
        self.max_retries = max_retries
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def search(
        self,
        query: str,
        *,
        num: int | None = None,
        safe: SafeSearch | None = None,
        gl: str | None = None,
        lr: str | None = None,
        start: int | None = None,
    ) -> GoogleSearchResponse:
        """
        Execute a search query against Google.

        Args:
            query: The search query string
            num: Number of results to return (1-10, default: max_results)
            safe: Safe search level
            gl: Geolocation country code (e.g. "us")
            lr: Language restriction (e.g. "lang_en")
            start: 1-based index of the first result

        Returns:
            The raw Google search response

        Raises:
            ProviderError: If the API request fails or returns a non-success status
        """
        params = {
            "key": self.api_key,
            "cx": self.search_engine_id,
            "q": query,
            "num": str(num or self.max_results),
        }
        if start:
            params["start"] = str(start)
        if safe:
            params["safe"] = safe
        if lr:
            params["lr"] = lr
        if gl:
            params["gl"] = gl

        for attempt, delay in enumerate(
            itertools.islice(exponential_backoff(factor=1.0), self.max_retries + 1)
        ):
            await asyncio.sleep(delay)  # 0, 1, 2, 4... seconds

            try:
                response = await self._client.get(self.base_url, params=params)
            except httpx.TimeoutException as e:
                raise ProviderError("Search request timed out") from e
            except httpx.HTTPError as e:
                raise ProviderError(f"Search request failed: {e}") from e

            if response.is_success:
                try:
                    return response.json()
                except ValueError as e:
                    raise ProviderError(
                        "Google Search API returned invalid JSON",
                        status_code=response.status_code,
                    ) from e

            if (
                response.status_code in RETRYABLE_STATUS_CODES
                and attempt < self.max_retries
            ):
                logger.warning(
                    f"Google returned {response.status_code}, retrying "
                    f"(attempt {attempt + 1}/{self.max_retries + 1})"
                )
                continue

            raise ProviderError(
                f"Google Search API error: {_error_message(response)}",
                status_code=response.status_code,
            )

        # Unreachable: the final attempt either returns or raises
        raise ProviderError("Maximum retries exceeded for search request")


def _error_message(response: httpx.Response) -> str:
    """Pull Google's error message out of a failed response, if it sent one."""
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase

    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.reason_phrase
