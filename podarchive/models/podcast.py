"""Podcast-level models: channel metadata, the parsed feed, and build configuration."""
import os
from dataclasses import dataclass, field
from pathlib import Path

from podarchive import constants
from podarchive.models.episode import Episode


@dataclass(frozen=True)
class PodcastMetadata:
    """Channel fields, read once per build."""
    title: str = constants.DEFAULT_TITLE
    description: str = constants.DEFAULT_DESCRIPTION
    author: str = constants.DEFAULT_AUTHOR
    image: str = ''  # Remote artwork URL
    link: str = constants.DEFAULT_LINK


@dataclass(frozen=True)
class Feed:
    """Metadata plus episodes sorted newest first, each with a unique slug."""
    metadata: PodcastMetadata
    episodes: tuple[Episode, ...] = ()

    def index_of(self, slug: str) -> int:
        for i, episode in enumerate(self.episodes):
            if episode.slug == slug:
                return i
        raise KeyError(slug)

    def older(self, episode: Episode) -> Episode | None:
        """The next older episode in sort order, if any."""
        i = self.index_of(episode.slug)
        return self.episodes[i + 1] if i + 1 < len(self.episodes) else None

    def newer(self, episode: Episode) -> Episode | None:
        """The next newer episode in sort order, if any."""
        i = self.index_of(episode.slug)
        return self.episodes[i - 1] if i > 0 else None


@dataclass
class BuildConfig:
    """Where the feed comes from and where the site goes."""
    feed_url: str = constants.DEFAULT_FEED_URL
    feed_file: Path | None = None  # When set, read locally instead of fetching
    output_root: Path = field(default_factory=lambda: Path(constants.OUTPUT_ROOT))
    timeout: float = constants.HTTP_TIMEOUT
    player_base_url: str = constants.PLAYER_BASE_URL

    @property
    def feed_source(self) -> str:
        return str(self.feed_file) if self.feed_file else self.feed_url

    @property
    def artwork_path(self) -> Path:
        return Path(self.output_root) / constants.ARTWORK_PATH

    @classmethod
    def from_env(cls) -> "BuildConfig":
        """Snapshot the current environment (call after load_dotenv)."""
        feed_file = os.getenv('PODARCHIVE_FEED_FILE')
        return cls(
            feed_url=os.getenv('PODARCHIVE_FEED_URL', constants.DEFAULT_FEED_URL),
            feed_file=Path(feed_file) if feed_file else None,
            output_root=Path(os.getenv('PODARCHIVE_OUTPUT_DIR', constants.OUTPUT_ROOT)),
            timeout=float(os.getenv('HTTP_TIMEOUT', str(constants.HTTP_TIMEOUT))),
            player_base_url=os.getenv('PODARCHIVE_PLAYER_URL', constants.PLAYER_BASE_URL),
        )
