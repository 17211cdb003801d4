"""Prefect flow that builds the podcast archive site."""
from pathlib import Path

from prefect import flow

from podarchive.models import BuildConfig
from podarchive.tasks.artwork import download_artwork
from podarchive.tasks.feed import load_feed, parse_feed_task
from podarchive.tasks.pages import copy_static_assets, render_pages, write_pages
from podarchive.utils.logging import get_logger


@flow(
    name="build-archive",
    log_prints=True
)
def build_archive(config: BuildConfig) -> int:
    """
    Build the whole site from the feed.

    Workflow:
    1. Load the RSS feed (local file or HTTP)
    2. Parse metadata and episodes, sorted newest first
    3. Download the podcast artwork unless it is already on disk
    4. Render all pages
    5. Write pages and static assets under the output root

    Any error aborts the run. There is no rollback, so a failure part way
    through can leave a partially updated output tree.

    Args:
        config: Build configuration

    Returns:
        Number of episode pages written
    """
    log = get_logger()
    output_root = Path(config.output_root)
    log.info(f"Building podcast archive from {config.feed_source} into {output_root}")

    # Step 1: Get the feed
    rss_content = load_feed(config)

    # Step 2: Parse and sort
    feed = parse_feed_task(rss_content)

    # Step 3: Artwork, downloaded once
    download_artwork(feed.metadata.image, config.artwork_path, timeout=config.timeout)

    # Step 4: Render
    pages = render_pages(feed, player_base_url=config.player_base_url)

    # Step 5: Write
    write_pages(pages, output_root)
    copy_static_assets(output_root)

    log.info(f"Build complete! {len(feed.episodes)} episode pages generated.")
    return len(feed.episodes)
