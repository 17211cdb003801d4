from podarchive.models.episode import Episode
from podarchive.models.podcast import BuildConfig, Feed, PodcastMetadata

__all__ = ["Episode", "PodcastMetadata", "Feed", "BuildConfig"]
