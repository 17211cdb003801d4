"""HTTP GET for the feed and artwork, following redirects by hand."""
from urllib.parse import urljoin

import humanize
import requests

from podarchive.constants import HTTP_TIMEOUT, HTTP_USER_AGENT, MAX_REDIRECTS
from podarchive.errors import FetchError, NetworkError
from podarchive.utils.logging import get_logger


def _get(url: str, session: requests.Session, timeout: float, hops: int = 0) -> requests.Response:
    """
    GET url, following 3xx responses that carry a Location header.

    Raises:
        NetworkError: connection failure, timeout, or more than MAX_REDIRECTS hops
        FetchError: any other non-2xx status
    """
    log = get_logger()
    try:
        response = session.get(url, timeout=timeout, allow_redirects=False)
    except requests.RequestException as e:
        raise NetworkError(url, str(e)) from e

    location = response.headers.get('Location')
    if 300 <= response.status_code < 400 and location:
        if hops >= MAX_REDIRECTS:
            raise NetworkError(url, f"more than {MAX_REDIRECTS} redirects")
        target = urljoin(url, location)
        log.debug(f"HTTP {response.status_code} redirect {url} -> {target}")
        return _get(target, session, timeout, hops + 1)

    if not 200 <= response.status_code < 300:
        log.error(f"Error fetching {url}: {response.status_code} {response.reason}")
        raise FetchError(response.status_code, url)

    return response


def _session() -> requests.Session:
    session = requests.Session()
    # Identify ourselves to avoid 403 errors from the host
    session.headers.update({'User-Agent': HTTP_USER_AGENT})
    return session


def fetch_text(url: str, session: requests.Session | None = None, timeout: float = HTTP_TIMEOUT) -> str:
    """
    Fetch a URL and return the body as text.

    Args:
        url: Address to fetch
        session: Optional requests session (one is created and closed otherwise)
        timeout: Per-request timeout in seconds

    Returns:
        Response body decoded as text
    """
    log = get_logger()
    owned = session is None
    session = session or _session()
    try:
        log.info(f"Fetching {url}")
        response = _get(url, session, timeout)
        text = response.text
    finally:
        if owned:
            session.close()

    log.info(f"Fetched {url} ({humanize.naturalsize(len(text))})")
    return text


def fetch_binary(url: str, session: requests.Session | None = None, timeout: float = HTTP_TIMEOUT) -> bytes:
    """Fetch a URL and return the raw body bytes (images)."""
    log = get_logger()
    owned = session is None
    session = session or _session()
    try:
        log.info(f"Downloading {url}")
        response = _get(url, session, timeout)
        content = response.content
    finally:
        if owned:
            session.close()

    log.info(f"Downloaded {url} ({humanize.naturalsize(len(content))})")
    return content
