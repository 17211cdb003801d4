"""Exceptions raised by the archive build.

Feed data problems are never errors; these cover I/O only, and every one of
them aborts the build.
"""


class ArchiveError(Exception):
    """Base exception for all build failures."""

    pass


class NetworkError(ArchiveError):
    """Connection-level failure: DNS, refused connection, timeout, redirect loop."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Network error fetching {url}: {reason}")


class FetchError(ArchiveError):
    """Server answered with a non-2xx status that was not a followable redirect."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP {status_code} from {url}")


class FilesystemError(ArchiveError):
    """Reading or writing a local path failed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Filesystem error on {path}: {reason}")
