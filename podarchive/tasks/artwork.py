"""Prefect task for downloading the podcast artwork."""
from pathlib import Path

import humanize
from prefect import task
from prefect.cache_policies import NO_CACHE

from podarchive.constants import HTTP_TIMEOUT
from podarchive.errors import FilesystemError
from podarchive.fetcher import fetch_binary
from podarchive.utils.logging import get_logger


@task(
    name="download-artwork",
    cache_policy=NO_CACHE,
    log_prints=True
)
def download_artwork(image_url: str, destination: Path, timeout: float = HTTP_TIMEOUT) -> Path | None:
    """
    Download the podcast artwork once.

    An existing file at the destination is never refreshed; delete it to force a
    new download.

    Args:
        image_url: Channel-level itunes:image URL (may be empty)
        destination: Where the image is saved
        timeout: HTTP timeout in seconds

    Returns:
        Path to the artwork, or None when the feed has no artwork URL

    Raises:
        FetchError, NetworkError: If the download fails
        FilesystemError: If the file can't be written
    """
    log = get_logger()
    destination = Path(destination)

    if not image_url:
        log.info("Feed has no artwork URL, skipping download")
        return None

    if destination.exists():
        log.info(f"Artwork already exists: {destination}")
        return destination

    log.info(f"Downloading podcast artwork to {destination}")
    data = fetch_binary(image_url, timeout=timeout)

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as e:
        raise FilesystemError(destination, str(e)) from e

    log.info(f"Artwork saved: {destination} ({humanize.naturalsize(len(data))})")
    return destination
