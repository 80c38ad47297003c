"""Run one IKB search from the command line.

Usage:
    python -m ikb_sports "NBA games 2024-12-15" [--view players] [--api-key KEY]

The API key defaults to IKB_API_KEY. Results are recorded to an in-process
memory store that is discarded on exit.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from .config import VIEW_MODES, IKBPluginConfig, get_settings
from .exceptions import ConfigurationError
from .logging import logger
from .memory import InMemoryMemoryStore
from .plugin import IKBSearchPlugin


async def run_search(query: str, view: str, api_key: str | None = None) -> int:
    settings = get_settings()
    config = IKBPluginConfig(api_key=api_key or settings.ikb_api_key or "", search_type=view)
    try:
        plugin = IKBSearchPlugin(config, InMemoryMemoryStore(), settings=settings)
    except ConfigurationError as exc:
        logger.error("ikb_cli_config_error", error=str(exc))
        print(str(exc), file=sys.stderr)
        return 2

    async with plugin:
        result = await plugin.search(query)

    print(result.response)
    return 0 if result.success else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search NBA and NFL statistics using the IKB API")
    parser.add_argument("query", help='Free-text query, e.g. "NFL stats from 2024-12-22"')
    parser.add_argument(
        "--view",
        choices=VIEW_MODES,
        default="game",
        help="Which rendering of the first game to print",
    )
    parser.add_argument("--api-key", help="IKB API key (defaults to IKB_API_KEY)")

    args = parser.parse_args(argv)
    return asyncio.run(run_search(args.query, args.view, api_key=args.api_key))


if __name__ == "__main__":
    sys.exit(main())
