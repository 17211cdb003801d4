"""Episode model produced by the feed parser."""
import re
from dataclasses import dataclass
from datetime import datetime

LEADING_INT_RE = re.compile(r'\s*(\d+)')


@dataclass(frozen=True)
class Episode:
    """One normalized feed item."""
    title: str = ''  # Display title, leading "N. " removed
    full_title: str = ''  # Title as published
    description: str = ''  # May contain markup
    summary: str = ''
    pub_date: str = ''  # Raw pubDate
    published: datetime | None = None
    duration: str = ''
    duration_raw: str = ''
    number: str = ''  # Empty when neither itunes:episode nor the title gives one
    season: str = '1'
    explicit: bool = False
    audio_url: str = ''
    image: str = ''
    source_id: str = ''  # Numeric id from the hosting platform's audio URL
    guid: str = ''
    slug: str = ''  # Output filename stem, unique within a Feed

    @property
    def sort_number(self) -> int:
        """Leading integer of the episode number, 0 when there isn't one."""
        match = LEADING_INT_RE.match(self.number)
        return int(match.group(1)) if match else 0

    @property
    def label(self) -> str:
        """Title as shown in lists: "42. Recovery Talk", or just the title if unnumbered."""
        if self.number:
            return f"{self.number}. {self.title}"
        return self.title

    @property
    def filename(self) -> str:
        return f"{self.slug}.html"
