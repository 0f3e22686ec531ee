"""
Efficient Search - Command Line Entry Point

Runs a single web search through the same cache, client and enricher stack the
MCP server uses, and prints the resulting payload.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from efficient_search import setup_logging  # noqa: E402
from efficient_search.settings import get_settings  # noqa: E402
from efficient_search.tools import create_search_tools  # noqa: E402


async def main():
    """
    Run a web search for the user-provided query
    """
    parser = argparse.ArgumentParser(
        description="Efficient Search - LLM-optimized Google search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli/main.py "python async programming"
  python cli/main.py "monsoon forecast" --num 5 --gl in --lr lang_en
        """,
    )
    parser.add_argument("query", help="Search query")
    parser.add_argument("--num", type=int, help="Number of results (1-10)")
    parser.add_argument(
        "--safe", choices=["off", "medium", "high"], help="Safe search level"
    )
    parser.add_argument("--gl", help="Geolocation country code, e.g. us")
    parser.add_argument("--lr", help="Language restriction, e.g. lang_en")

    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings.log_dir, settings.log_level)
    search_tools = create_search_tools(settings)

    try:
        payload = await search_tools.call_tool(
            "web_search",
            {
                "query": args.query,
                "num": args.num,
                "safe": args.safe,
                "gl": args.gl,
                "lr": args.lr,
            },
        )
    finally:
        await search_tools.client.aclose()

    print(json.dumps(payload, indent=2, ensure_ascii=False))
    if "error" in payload:
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
