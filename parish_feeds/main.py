"""Command-line entrypoint for the parish feeds client.

Fetches one feed and prints its URL, the root element and the titles of any
RSS/Atom entries it contains.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from .client import FEED_NAMES, FeedClient
from .models import Endpoints, FeedResult
from .utils.config_loader import ConfigError, load_endpoints_config
from .utils.logging import configure_logging, get_logger


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch one of the parish XML feeds")
    parser.add_argument("feed", choices=FEED_NAMES, help="Which feed to fetch")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to an endpoints configuration file (YAML); built-in endpoints if omitted",
    )
    parser.add_argument("--format", default=None, help="Feed format (news, blog and social feeds)")
    parser.add_argument("--count", type=int, default=None, help="Number of social posts to fetch")
    parser.add_argument("--days", type=int, default=None, help="Number of calendar days to fetch")
    parser.add_argument(
        "--caching",
        action="store_true",
        help="Allow a cached service times document (no cache-buster)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _run_feed(client: FeedClient, args: argparse.Namespace) -> FeedResult:
    if args.feed == "news":
        return client.get_news(args.format)
    if args.feed == "blog":
        return client.get_blog(args.format)
    if args.feed == "social":
        return client.get_social(args.format, args.count)
    if args.feed == "page":
        return client.get_page()
    if args.feed == "calendar":
        return client.get_calendar(args.days)
    return client.get_service_times(args.caching)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level, module="feeds")
    logger = get_logger("feeds.cli")

    endpoints = Endpoints()
    if args.config:
        config_path = Path(args.config)
        logger.info("Loading endpoints configuration from %s", config_path)
        try:
            endpoints = load_endpoints_config(config_path)
        except ConfigError as exc:
            logger.error("Failed to load configuration: %s", exc)
            return 1

    with FeedClient(endpoints=endpoints) as client:
        result = _run_feed(client, args)

    print(result.url)
    if not result.ok:
        print(result.reason)
        return 1

    print(f"<{result.document.tag}>")
    for item in result.entries():
        stamp = f"{item.published:%Y-%m-%d} " if item.published else ""
        print(f"- {stamp}{item.title}")
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
