"""Prefect tasks for rendering pages and writing the site to disk."""
from importlib import resources
from pathlib import Path

from prefect import task
from prefect.cache_policies import NO_CACHE

from podarchive.constants import EPISODES_DIR
from podarchive.errors import FilesystemError
from podarchive.models import Feed
from podarchive.render import render_site
from podarchive.utils.logging import get_logger

# Companion assets shipped in podarchive/static, copied verbatim to the output root
STATIC_ASSETS = ['js/main.js', 'css/style.css']


def _write(path: Path, content) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding='utf-8')
    except OSError as e:
        raise FilesystemError(path, str(e)) from e
    return path


def _target(output_root: Path, rel_path: str) -> Path:
    """Resolve a page path, refusing anything that lands outside the output root."""
    root = output_root.resolve()
    path = (root / rel_path).resolve()
    if not path.is_relative_to(root):
        raise FilesystemError(output_root / rel_path, "path escapes the output root")
    return path


@task(
    name="render-pages",
    cache_policy=NO_CACHE,
    log_prints=True
)
def render_pages(feed: Feed, player_base_url: str = '') -> dict[str, str]:
    """
    Render every page in memory.

    Args:
        feed: Parsed feed
        player_base_url: Embed player base URL, empty for plain <audio>

    Returns:
        Mapping of relative output path -> HTML
    """
    log = get_logger()
    log.info("Generating HTML pages...")
    pages = render_site(feed, player_base_url=player_base_url)
    log.info(f"Rendered {len(pages)} pages")
    return pages


@task(
    name="write-pages",
    cache_policy=NO_CACHE,
    log_prints=True
)
def write_pages(pages: dict[str, str], output_root: Path) -> list[Path]:
    """
    Write rendered pages under the output root.

    The episodes directory is created if it's missing. Nothing is cleaned up on
    failure, so a failed run can leave a partially updated tree.

    Args:
        pages: Relative path -> HTML, as returned by render_pages
        output_root: Site root directory

    Returns:
        Paths written, in the order given

    Raises:
        FilesystemError: If a path escapes the output root, or a directory or
            file can't be written
    """
    log = get_logger()
    output_root = Path(output_root)

    episodes_dir = output_root / EPISODES_DIR
    if not episodes_dir.exists():
        log.info(f"Creating episodes directory: {episodes_dir}")
        try:
            episodes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(episodes_dir, str(e)) from e

    targets = [(_target(output_root, rel_path), rel_path, html) for rel_path, html in pages.items()]

    written = []
    for path, rel_path, html in targets:
        written.append(_write(path, html))
        log.debug(f"  {rel_path}")

    log.info(f"Wrote {len(written)} pages to {output_root}")
    return written


@task(
    name="copy-static-assets",
    cache_policy=NO_CACHE,
    log_prints=True
)
def copy_static_assets(output_root: Path) -> list[Path]:
    """Write the companion script and stylesheet into the output root."""
    log = get_logger()
    static = resources.files('podarchive') / 'static'
    copied = []
    for rel_path in STATIC_ASSETS:
        data = (static / rel_path).read_bytes()
        copied.append(_write(Path(output_root) / rel_path, data))
    log.info(f"Copied {len(copied)} static assets")
    return copied
