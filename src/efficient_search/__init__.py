"""
Efficient Search Package

LLM-optimized web search over the Google Programmable Search Engine, with
result enrichment and in-memory caching, exposed as MCP tools.
"""

from efficient_search.logger import setup_logging
from efficient_search.tools import SearchTools

__version__ = "0.1.0"
__all__ = ["SearchTools", "setup_logging"]
