"""Text cleanup and formatting helpers for feed content."""
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from podarchive.constants import SOURCE_PREFIX

TAG_RE = re.compile(r'<[^>]+>')

# Only the entities podcast hosts actually emit; no general table.
ENTITIES = [
    ('&nbsp;', ' '),
    ('&amp;', '&'),
    ('&lt;', '<'),
    ('&gt;', '>'),
    ('&#39;', "'"),
    ('&quot;', '"'),
]

SOURCE_PREFIX_RE = re.compile(rf'^{re.escape(SOURCE_PREFIX)}\s*', re.IGNORECASE)
ELLIPSIS = '...'

# ASCII only: str.isdigit() also accepts superscripts that int() rejects
SECONDS_RE = re.compile(r'[0-9]+')

MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']


def strip_markup(text: str) -> str:
    """Remove all tags and decode the handful of entities feeds use."""
    text = TAG_RE.sub('', text)
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def remove_source_prefix(text: str) -> str:
    """Drop the "Send us a text" boilerplate when it opens the text."""
    return SOURCE_PREFIX_RE.sub('', text, count=1)


def clean_description(text: str) -> str:
    return remove_source_prefix(strip_markup(text))


def truncate(text: str, max_length: int = 200) -> str:
    """
    Plain-text excerpt of at most max_length characters plus an ellipsis.

    Markup and the source prefix are removed first. The cut backs up to the last
    whitespace so a word is never split; a single token longer than max_length
    has no boundary to back up to and is cut hard.
    """
    plain = clean_description(text)
    if len(plain) <= max_length:
        return plain

    cut = plain[:max_length]
    if not plain[max_length].isspace():
        # Mid-word: drop the partial word
        head = re.sub(r'\s+\S*$', '', cut)
        if head != cut:
            cut = head
    return cut.rstrip() + ELLIPSIS


def slugify(title: str) -> str:
    return re.sub(r'[^a-z0-9]+', '-', title.lower()).strip('-')


def format_duration(raw: str) -> str:
    """
    Render a duration in seconds as "1h 2m" or "45 min".

    Anything that is not a plain integer (e.g. "00:45:12") is assumed to be
    formatted already and is returned unchanged.
    """
    value = raw.strip()
    if not SECONDS_RE.fullmatch(value):
        return raw
    seconds = int(value)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes} min"


def parse_pub_date(raw: str) -> datetime | None:
    """Parse an RFC 2822 pubDate. Naive results are taken as UTC; garbage gives None."""
    if not raw:
        return None
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError, IndexError, OverflowError):
        return None
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: datetime | None) -> str:
    """Format as "Jan. 5, 2024"; empty for a missing date."""
    if value is None:
        return ''
    return f"{MONTHS[value.month - 1]}. {value.day}, {value.year}"
