"""
Tests for the MCP server tool wrappers and lifespan.
"""

import json
from unittest.mock import AsyncMock, Mock, patch

import pytest

from efficient_search.settings import Settings
from efficient_search.tools import SearchTools
from mcp_server import server


@pytest.fixture
def mock_ctx():
    """Context whose lifespan state is a mocked SearchTools."""
    search_tools = Mock(spec=SearchTools)
    search_tools.call_tool = AsyncMock(return_value={"size": 0})
    ctx = Mock()
    ctx.request_context.lifespan_context = search_tools
    return ctx


class TestServerTools:
    """Each MCP tool delegates to SearchTools.call_tool and returns JSON text."""

    @pytest.mark.asyncio
    async def test_web_search_tool(self, mock_ctx):
        mock_ctx.request_context.lifespan_context.call_tool.return_value = {
            "query": "q",
            "summary": 'No results found for "q"',
        }

        result = await server.web_search("q", mock_ctx, num=3, safe="off")

        assert result.isError is False
        assert json.loads(result.content[0].text)["query"] == "q"
        mock_ctx.request_context.lifespan_context.call_tool.assert_awaited_once_with(
            "web_search",
            {"query": "q", "num": 3, "safe": "off", "gl": None, "lr": None},
        )

    @pytest.mark.asyncio
    async def test_error_payload_is_returned_as_text(self, mock_ctx):
        mock_ctx.request_context.lifespan_context.call_tool.return_value = {
            "error": "query is required"
        }

        result = await server.web_search("", mock_ctx)

        assert result.isError is True
        assert json.loads(result.content[0].text) == {"error": "query is required"}

    @pytest.mark.asyncio
    async def test_cache_tools(self, mock_ctx):
        call_tool = mock_ctx.request_context.lifespan_context.call_tool

        stats = await server.get_cache_stats(mock_ctx)
        assert json.loads(stats.content[0].text) == {"size": 0}
        assert stats.isError is False
        call_tool.assert_awaited_with("get_cache_stats")

        await server.clear_cache(mock_ctx)
        call_tool.assert_awaited_with("clear_cache")

    @pytest.mark.asyncio
    async def test_web_search_schema_constrains_options(self):
        tools = {tool.name: tool for tool in await server.mcp.list_tools()}
        properties = tools["web_search"].inputSchema["properties"]

        num_schema = json.dumps(properties["num"])
        assert '"minimum": 1' in num_schema
        assert '"maximum": 10' in num_schema
        assert '"enum": ["off", "medium", "high"]' in json.dumps(properties["safe"])
        assert "ctx" not in properties
        assert tools["web_search"].inputSchema["required"] == ["query"]


class TestLifespan:
    """The lifespan owns the search stack for the life of the server."""

    @pytest.mark.asyncio
    async def test_lifespan_builds_and_closes_stack(self, tmp_path):
        settings = Settings(
            google_api_key="key",
            search_engine_id="cx",
            log_dir=str(tmp_path),
            _env_file=None,
        )

        with (
            patch("mcp_server.server.get_settings", return_value=settings),
            patch("mcp_server.server.setup_logging") as mock_setup_logging,
        ):
            async with server.lifespan(server.mcp) as search_tools:
                assert isinstance(search_tools, SearchTools)
                assert search_tools.cache.get_stats()["max_size"] == 100
                assert not search_tools.client._client.is_closed

            assert search_tools.client._client.is_closed
            mock_setup_logging.assert_called_once_with(str(tmp_path), "INFO")
