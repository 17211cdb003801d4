#!/usr/bin/env python3
"""
Podcast RSS feed parser.

Turns the raw feed text into a Feed: channel metadata plus normalized episodes,
sorted newest first by episode number then publish date, each with a unique
slug that becomes its page filename.

Parsing never fails on feed content. Missing tags become empty fields, bad
dates become None (with a warning), and duplicate slugs get a numeric suffix.
"""

import re
from collections import Counter
from dataclasses import replace
from datetime import datetime, timezone

from loguru import logger as log

from podarchive import constants
from podarchive.models import Episode, Feed, PodcastMetadata
from podarchive.text import format_duration, parse_pub_date, slugify
from podarchive.xml_extract import all_items, attr_value, channel_fragment, tag_content, unwrap_cdata

# Hosting platforms put their numeric episode id in the audio URL path
SOURCE_ID_RE = re.compile(r'episodes/(\d+)')
TITLE_NUMBER_RE = re.compile(r'^(\d+)\.')
TITLE_PREFIX_RE = re.compile(r'^\d+\.\s*')

EXPLICIT_VALUES = ('true', 'yes')
FALLBACK_SLUG = 'episode'
# Episode numbers used verbatim as filenames; anything else goes through slugify
SAFE_SLUG_RE = re.compile(r'[0-9A-Za-z_-][0-9A-Za-z._-]*')
OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def extract_episode_number(title: str, explicit_number: str = '') -> str:
    """
    Episode number for an item.

    The itunes:episode value wins; otherwise a leading "42." in the title;
    otherwise empty.
    """
    if explicit_number:
        return explicit_number
    m = TITLE_NUMBER_RE.match(title)
    if m:
        return m.group(1)
    return ''


def episode_slug(number: str, title: str) -> str:
    """
    Filename stem for an episode: the number when it is filename-safe, else a
    slug of the number, else a slug of the title.
    """
    if number and SAFE_SLUG_RE.fullmatch(number):
        return number
    return slugify(number) or slugify(title) or FALLBACK_SLUG


def parse_episode(item_xml: str, default_image: str = '') -> Episode:
    """
    Normalize one <item> fragment.

    Args:
        item_xml: Body of a single <item> element
        default_image: Podcast artwork URL, used when the item has no itunes:image

    Returns:
        Episode with every field populated or defaulted
    """
    title = unwrap_cdata(tag_content(item_xml, 'title'))
    description = unwrap_cdata(tag_content(item_xml, 'description'))
    pub_date = tag_content(item_xml, 'pubDate')
    duration_raw = tag_content(item_xml, 'itunes:duration')
    explicit_number = tag_content(item_xml, 'itunes:episode')
    season = tag_content(item_xml, 'itunes:season')
    explicit = tag_content(item_xml, 'itunes:explicit')
    summary = unwrap_cdata(tag_content(item_xml, 'itunes:summary') or tag_content(item_xml, 'description'))
    guid = tag_content(item_xml, 'guid')

    audio_url = attr_value(item_xml, 'enclosure', 'url')
    image = attr_value(item_xml, 'itunes:image', 'href')

    m = SOURCE_ID_RE.search(audio_url)
    source_id = m.group(1) if m else ''

    number = extract_episode_number(title, explicit_number)

    published = parse_pub_date(pub_date)
    if published is None:
        log.warning(f"Unparseable pubDate {pub_date!r} for episode {title[:60]!r}")

    return Episode(
        title=TITLE_PREFIX_RE.sub('', title),
        full_title=title,
        description=description,
        summary=summary,
        pub_date=pub_date,
        published=published,
        duration=format_duration(duration_raw),
        duration_raw=duration_raw,
        number=number,
        season=season or '1',
        explicit=explicit in EXPLICIT_VALUES,
        audio_url=audio_url,
        image=image or default_image,
        source_id=source_id,
        guid=guid,
        slug=episode_slug(number, title),
    )


def parse_metadata(xml: str) -> PodcastMetadata:
    """Channel-level fields, with project defaults for anything missing."""
    channel = channel_fragment(xml)
    return PodcastMetadata(
        title=unwrap_cdata(tag_content(channel, 'title')) or constants.DEFAULT_TITLE,
        description=unwrap_cdata(tag_content(channel, 'description')) or constants.DEFAULT_DESCRIPTION,
        author=tag_content(channel, 'itunes:author') or constants.DEFAULT_AUTHOR,
        image=attr_value(channel, 'itunes:image', 'href'),
        link=tag_content(channel, 'link') or constants.DEFAULT_LINK,
    )


def sort_episodes(episodes) -> list[Episode]:
    """
    Newest first: by episode number, then by publish date.

    Unnumbered episodes count as number 0, so they land after every numbered
    episode regardless of when they were published.
    """
    return sorted(episodes, key=lambda ep: (ep.sort_number, ep.published or OLDEST), reverse=True)


def dedupe_slugs(episodes) -> list[Episode]:
    """
    Make slugs unique. The first episode (in the given order) keeps its slug,
    later ones get -2, -3, ... appended.
    """
    counts = Counter(ep.slug for ep in episodes)
    taken = set()
    seen = Counter()
    result = []
    for ep in episodes:
        slug = ep.slug
        if counts[slug] > 1:
            seen[slug] += 1
            if seen[slug] > 1:
                suffix = seen[slug]
                while f"{slug}-{suffix}" in counts or f"{slug}-{suffix}" in taken:
                    suffix += 1
                new_slug = f"{slug}-{suffix}"
                log.warning(f"Duplicate slug {slug!r} for {ep.full_title[:60]!r}, writing it as {new_slug!r}")
                ep = replace(ep, slug=new_slug)
        taken.add(ep.slug)
        result.append(ep)
    return result


def parse_feed(xml: str) -> Feed:
    """
    Parse a full RSS document.

    Args:
        xml: Feed text as fetched or read from disk

    Returns:
        Feed with metadata and sorted, slug-unique episodes
    """
    metadata = parse_metadata(xml)
    items = all_items(xml)
    log.info(f"Found {len(items)} episodes in feed for {metadata.title}")

    episodes = [parse_episode(item, default_image=metadata.image) for item in items]
    episodes = dedupe_slugs(sort_episodes(episodes))

    return Feed(metadata=metadata, episodes=tuple(episodes))
