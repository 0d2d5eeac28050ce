"""
Console client: lists the categories and prints the movies of one category as a table.

    python -m client.console_app --category-id 3
"""
import argparse
import asyncio
import json
import logging
import sys
from typing import List, Optional

from client.api_client import (
    ApiConnectionError,
    ApiResponseError,
    MalformedResponseError,
    MovieManagerClient,
)
from client.table import render_movies
from config.logging_config import setup_logging
from config.settings import API_BASE_URL, API_TIMEOUT

logger = logging.getLogger(__name__)

EXIT_CONNECTION_ERROR = 2
EXIT_MALFORMED_RESPONSE = 3
EXIT_RESPONSE_ERROR = 4


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query the movie manager API.")
    parser.add_argument("--base-url", default=API_BASE_URL, help="API base URL")
    parser.add_argument("--category-id", type=int, default=3, help="Category whose movies are listed")
    parser.add_argument("--timeout", type=float, default=API_TIMEOUT, help="Request timeout in seconds")
    return parser.parse_args(argv)


async def run(client: MovieManagerClient, category_id: int) -> None:
    for category in await client.get_categories():
        print(json.dumps(category, ensure_ascii=False))
    print()
    print(render_movies(await client.get_movies_for_category(category_id)))


async def main_async(args: argparse.Namespace) -> int:
    async with MovieManagerClient(args.base_url, timeout=args.timeout) as client:
        try:
            await run(client, args.category_id)
        except ApiConnectionError as e:
            print(f"Error: API not reachable at {args.base_url}: {e}", file=sys.stderr)
            return EXIT_CONNECTION_ERROR
        except MalformedResponseError as e:
            print(f"Error: malformed API response: {e}", file=sys.stderr)
            return EXIT_MALFORMED_RESPONSE
        except ApiResponseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_RESPONSE_ERROR
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    return asyncio.run(main_async(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
