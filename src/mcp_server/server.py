"""
Efficient Search MCP Server Implementation

Provides MCP tools for LLM-optimized web search with result caching.
"""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from mcp.server.fastmcp import Context, FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from efficient_search import SearchTools, setup_logging
from efficient_search.search.google_client import SafeSearch
from efficient_search.settings import get_settings
from efficient_search.tools import (
    MAX_RESULTS,
    MIN_RESULTS,
    TOOL_DESCRIPTIONS,
    create_search_tools,
)

logger = logging.getLogger("efficient_search.server")


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[SearchTools]:
    """Build the search stack at startup and close the HTTP client at shutdown."""
    settings = get_settings()
    setup_logging(settings.log_dir, settings.log_level)

    search_tools = create_search_tools(settings)
    logger.info(
        f"🚀 Efficient Search MCP server starting "
        f"(cache ttl={settings.cache_ttl_minutes}m, max size={settings.cache_max_size})"
    )
    try:
        yield search_tools
    finally:
        await search_tools.client.aclose()
        logger.info("Efficient Search MCP server stopped")


# Create the FastMCP server instance
mcp = FastMCP("Efficient Search", lifespan=lifespan)


def _get_search_tools(ctx: Context) -> SearchTools:
    return ctx.request_context.lifespan_context


def _to_result(payload: dict[str, Any]) -> CallToolResult:
    """Wrap a tool payload as JSON text, flagging error payloads for the client."""
    return CallToolResult(
        content=[
            TextContent(
                type="text", text=json.dumps(payload, indent=2, ensure_ascii=False)
            )
        ],
        isError="error" in payload,
    )


@mcp.tool(description=TOOL_DESCRIPTIONS["web_search"])
async def web_search(
    query: str,
    ctx: Context,
    num: Annotated[int, Field(ge=MIN_RESULTS, le=MAX_RESULTS)] | None = None,
    safe: SafeSearch | None = None,
    gl: str | None = None,
    lr: str | None = None,
) -> CallToolResult:
    """
    Args:
        query: Search query
        num: Number of results to return (1-10, default: 10)
        safe: Safe search level ("off", "medium" or "high")
        gl: Geolocation (country code, e.g., "us", "in")
        lr: Language restriction (e.g., "lang_en", "lang_hi")
    """
    arguments = {"query": query, "num": num, "safe": safe, "gl": gl, "lr": lr}
    payload = await _get_search_tools(ctx).call_tool("web_search", arguments)
    return _to_result(payload)


@mcp.tool(description=TOOL_DESCRIPTIONS["clear_cache"])
async def clear_cache(ctx: Context) -> CallToolResult:
    payload = await _get_search_tools(ctx).call_tool("clear_cache")
    return _to_result(payload)


@mcp.tool(description=TOOL_DESCRIPTIONS["get_cache_stats"])
async def get_cache_stats(ctx: Context) -> CallToolResult:
    payload = await _get_search_tools(ctx).call_tool("get_cache_stats")
    return _to_result(payload)


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
