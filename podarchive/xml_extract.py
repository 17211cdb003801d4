"""
Regex helpers for pulling fields out of raw RSS text.

No DOM is built. Lookups are only ever run against a single <item> fragment or
the channel header (see channel_fragment), so the first match of a tag is the
right one even in feeds that repeat tag names at different levels.
Missing tags come back as an empty string, never an exception.
"""
import re
from functools import lru_cache

CDATA_RE = re.compile(r'<!\[CDATA\[([\s\S]*?)\]\]>')
TAG_RE = re.compile(r'<[^>]+>')
ITEM_RE = re.compile(r'<item(?:\s[^>]*)?>([\s\S]*?)</item>', re.IGNORECASE)
CHANNEL_RE = re.compile(r'<channel(?:\s[^>]*)?>([\s\S]*?)(?:<item[\s>]|</channel>)', re.IGNORECASE)


@lru_cache(maxsize=64)
def _content_re(tag: str) -> re.Pattern:
    # The name must end at whitespace or '>' so itunes:episode never matches
    # itunes:episodeType, and a self-closing tag never opens a match.
    name = re.escape(tag)
    return re.compile(rf'<{name}(?:\s[^>]*?)?(?<!/)>([\s\S]*?)</{name}>', re.IGNORECASE)


@lru_cache(maxsize=64)
def _attr_re(tag: str, attr: str) -> re.Pattern:
    return re.compile(rf'<{re.escape(tag)}(?=[\s/>])[^>]*\s{re.escape(attr)}=["\']([^"\']*)["\']',
                      re.IGNORECASE)


def tag_content(xml: str, tag: str) -> str:
    """Inner text of the first <tag>...</tag>, trimmed."""
    match = _content_re(tag).search(xml)
    return match.group(1).strip() if match else ''


def attr_value(xml: str, tag: str, attr: str) -> str:
    """Quoted attribute value from the first matching opening or self-closing tag."""
    match = _attr_re(tag, attr).search(xml)
    return match.group(1) if match else ''


def unwrap_cdata(text: str) -> str:
    """Inner content of a CDATA section, else the text with all markup stripped."""
    match = CDATA_RE.search(text)
    if match:
        return match.group(1).strip()
    return TAG_RE.sub('', text).strip()


def all_items(xml: str) -> list[str]:
    """Every <item> body, in document order."""
    return ITEM_RE.findall(xml)


def channel_fragment(xml: str) -> str:
    """Channel header: everything after <channel> up to the first <item> (or </channel>)."""
    match = CHANNEL_RE.search(xml)
    return match.group(1) if match else ''
