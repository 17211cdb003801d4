#!/usr/bin/env python3
"""
Build the podcast archive site.

Usage:
    podarchive                          # Fetch the default RSS feed
    podarchive --file feed.rss          # Read from a local RSS file
    podarchive --output public/ --log-level DEBUG

Settings can also come from the environment or a .env file:
    PODARCHIVE_FEED_URL, PODARCHIVE_FEED_FILE, PODARCHIVE_OUTPUT_DIR,
    PODARCHIVE_PLAYER_URL, HTTP_TIMEOUT, LOG_LEVEL
"""
import argparse
import os
import sys
from pathlib import Path

from dotenv import load_dotenv
from loguru import logger as log

from podarchive.errors import ArchiveError
from podarchive.models import BuildConfig
from podarchive.utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podarchive",
        description="Generate the static podcast archive site from its RSS feed",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Fetch the live feed and build into ./site:
    podarchive

  Build from a saved copy of the feed:
    podarchive --file feed.rss --output public
        """
    )
    parser.add_argument("--file", dest="feed_file", type=Path, default=None,
                        help="Read the RSS feed from this local file instead of fetching it")
    parser.add_argument("--feed-url", default=None,
                        help="Feed URL to fetch (default: PODARCHIVE_FEED_URL or the built-in feed)")
    parser.add_argument("--output", type=Path, default=None,
                        help="Output directory (default: PODARCHIVE_OUTPUT_DIR or ./site)")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Console log level (default: LOG_LEVEL or INFO)")
    return parser


def config_from_args(args: argparse.Namespace) -> BuildConfig:
    """Environment first, then command line flags on top."""
    config = BuildConfig.from_env()
    if args.feed_file:
        config.feed_file = args.feed_file
    if args.feed_url:
        config.feed_url = args.feed_url
    if args.output:
        config.output_root = args.output
    return config


def main(argv=None) -> int:
    load_dotenv()  # take environment variables from .env.

    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or os.getenv('LOG_LEVEL', 'INFO'))
    config = config_from_args(args)

    # Imported late so Prefect picks up any settings loaded from .env
    from podarchive.flows.build import build_archive

    log.info("Podcast Archive Builder")
    log.info("=" * 40)
    try:
        count = build_archive(config)
    except ArchiveError as e:
        log.error(f"Build failed: {e}")
        sys.exit(1)
    except Exception as e:
        log.exception(f"Build failed with unexpected error: {e}")
        sys.exit(1)

    log.info(f"Done: {count} episode pages in {config.output_root}")
    return 0


if __name__ == "__main__":
    main()
