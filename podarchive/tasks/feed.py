"""Prefect tasks for loading and parsing the podcast feed."""
from pathlib import Path

import humanize
from prefect import task
from prefect.cache_policies import NO_CACHE

from podarchive.errors import FilesystemError
from podarchive.feed_parser import parse_feed
from podarchive.fetcher import fetch_text
from podarchive.models import BuildConfig, Feed
from podarchive.utils.logging import get_logger


def read_feed_file(path: Path) -> str:
    """Read a pre-fetched feed from disk."""
    log = get_logger()
    log.info(f"Reading RSS from file: {path}")
    try:
        text = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemError(path, str(e)) from e
    log.debug(f"Read {humanize.naturalsize(len(text))} from {path}")
    return text


@task(
    name="load-feed",
    cache_policy=NO_CACHE,
    log_prints=True
)
def load_feed(config: BuildConfig) -> str:
    """
    Get the RSS text, from the local file when one is configured, else over HTTP.

    Args:
        config: Build configuration

    Returns:
        RSS feed content as string

    Raises:
        FilesystemError: If the local file can't be read
        FetchError: If the server returns a non-2xx status
        NetworkError: If the connection fails
    """
    if config.feed_file:
        return read_feed_file(config.feed_file)
    return fetch_text(config.feed_url, timeout=config.timeout)


@task(
    name="parse-feed",
    cache_policy=NO_CACHE,
    log_prints=True
)
def parse_feed_task(rss_content: str) -> Feed:
    """
    Parse the feed into metadata and a sorted episode collection.

    Args:
        rss_content: RSS feed XML content as string

    Returns:
        Parsed Feed
    """
    log = get_logger()
    log.info(f"RSS content length: {len(rss_content)} characters")

    feed = parse_feed(rss_content)
    meta = feed.metadata
    log.info(f"Podcast: {meta.title}")
    log.info(f"Author: {meta.author}")
    if meta.image:
        log.info(f"Artwork: {meta.image}")

    for ep in feed.episodes:
        when = humanize.naturaldate(ep.published) if ep.published else 'unknown date'
        log.debug(f"  {'Ep ' + ep.number if ep.number else '?'}: {ep.title} ({when})")

    return feed
