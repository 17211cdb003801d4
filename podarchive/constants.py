from os import getenv

from pathlib import Path

# Feed and output defaults, overridable from the environment (or a .env file)
DEFAULT_FEED_URL = getenv('PODARCHIVE_FEED_URL', 'https://www.buzzsprout.com/2117363.rss')
OUTPUT_ROOT = getenv('PODARCHIVE_OUTPUT_DIR', str(Path.cwd() / 'site'))

# Buzzsprout small-player embed. Empty string disables the iframe and falls back to <audio>.
PLAYER_BASE_URL = getenv('PODARCHIVE_PLAYER_URL', 'https://www.buzzsprout.com/2117363')

# HTTP
HTTP_USER_AGENT = getenv('HTTP_USER_AGENT', 'SurvivorScienceArchiveBuilder/1.0')
HTTP_TIMEOUT = float(getenv('HTTP_TIMEOUT', '30'))
MAX_REDIRECTS = 10

LOG_LEVEL = getenv('LOG_LEVEL', 'INFO')

# Output layout, relative to the output root
EPISODES_DIR = 'episodes'
ARTWORK_PATH = 'images/podcast-artwork.jpg'

# Channel-level fallbacks when the feed omits a field
DEFAULT_TITLE = 'Survivor Science'
DEFAULT_DESCRIPTION = 'Stroke recovery is brutal. It takes discipline, obsession, and endless hours of work.'
DEFAULT_AUTHOR = 'Will Schmierer'
DEFAULT_LINK = 'https://podcast.survivorscience.com'

# Buzzsprout prepends a fan-mail link to every description
SOURCE_PREFIX = 'Send us a text'

# Page sizes
HOME_GRID_SIZE = 6
SIDEBAR_SIZE = 10
HERO_EXCERPT = 250
CARD_EXCERPT = 180
META_EXCERPT = 160

# Site links rendered in nav, footer and sidebar
MAIN_SITE_URL = 'https://survivorscience.com'
CONTACT_URL = 'https://survivorscience.com/contact'
SOCIAL_LINKS = [
    ('Twitter', 'https://twitter.com/SurvivorSciHQ'),
    ('LinkedIn', 'https://www.linkedin.com/in/willschmierer/'),
    ('TikTok', 'https://www.tiktok.com/@SurvivorScienceHQ'),
    ('Instagram', 'https://www.instagram.com/SurvivorScienceHQ/'),
    ('YouTube', 'https://www.youtube.com/@SurvivorScienceHQ'),
]
LISTEN_LINKS = [
    ('Apple Podcasts', 'https://podcasts.apple.com/us/podcast/survivor-science/id1667418261'),
    ('Spotify', 'https://open.spotify.com/show/1Pn79nkerjQ7vXK0V2Wfif'),
]
RSS_LINK = 'https://rss.buzzsprout.com/2117363.rss'
