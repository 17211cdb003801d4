"""
HTML page rendering.

Every page is a Jinja2 template under podarchive/templates. Autoescaping is on,
so feed text (titles, descriptions, author) is escaped wherever it lands. The
one exception is the show-notes body on episode pages, which is passed through
with only the source prefix removed so hosts can keep inline formatting.

Pages at the site root link to episodes as "episodes/<slug>.html"; episode
pages live one level down and use a "../" root prefix instead.
"""
from jinja2 import Environment, PackageLoader, select_autoescape

from podarchive import constants
from podarchive.models import Episode, Feed
from podarchive.text import clean_description, format_date, remove_source_prefix, truncate

ROOT_PAGES = {'home': 'index.html', 'episodes': 'episodes.html', 'about': 'about.html'}


def nav_label(episode: Episode) -> str:
    """Prev/next link text."""
    if episode.number:
        return f"Episode {episode.number}"
    return episode.title


def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader('podarchive', 'templates'),
        autoescape=select_autoescape(['html']),
        trim_blocks=True,
        lstrip_blocks=False,
        keep_trailing_newline=True,
    )
    env.filters['excerpt'] = truncate
    env.filters['clean'] = clean_description
    env.filters['date'] = format_date
    env.filters['remove_source_prefix'] = remove_source_prefix
    env.filters['nav_label'] = nav_label
    env.globals.update(
        artwork_path=constants.ARTWORK_PATH,
        main_site_url=constants.MAIN_SITE_URL,
        contact_url=constants.CONTACT_URL,
        social_links=constants.SOCIAL_LINKS,
        listen_links=constants.LISTEN_LINKS,
        rss_link=constants.RSS_LINK,
        hero_excerpt=constants.HERO_EXCERPT,
        card_excerpt=constants.CARD_EXCERPT,
        meta_excerpt=constants.META_EXCERPT,
    )
    return env


env = _environment()


def _context(feed: Feed, active: str, nested: bool = False) -> dict:
    return {
        'podcast': feed.metadata,
        'episodes': feed.episodes,
        'recent_episodes': feed.episodes[:constants.SIDEBAR_SIZE],
        'active': active,
        'root': '../' if nested else '',
        'episode_prefix': '' if nested else f"{constants.EPISODES_DIR}/",
    }


def render_home(feed: Feed) -> str:
    """Home page: newest episode as the hero, the first few as a grid, plus sidebar."""
    context = _context(feed, 'home')
    context['latest'] = feed.episodes[0] if feed.episodes else None
    context['grid'] = feed.episodes[:constants.HOME_GRID_SIZE]
    return env.get_template('index.html').render(**context)


def render_episode_list(feed: Feed) -> str:
    """All episodes as cards, with the search box the companion script filters on."""
    return env.get_template('episodes.html').render(**_context(feed, 'episodes'))


def render_episode(feed: Feed, episode: Episode, player_base_url: str = '') -> str:
    """
    Detail page for one episode.

    Args:
        feed: The full parsed feed (for sidebar and prev/next)
        episode: Episode to render, must be one of feed.episodes
        player_base_url: Embed player base; empty means use a plain <audio> element

    Returns:
        Complete HTML document
    """
    context = _context(feed, 'episodes', nested=True)
    context.update(
        episode=episode,
        older=feed.older(episode),
        newer=feed.newer(episode),
        player_base_url=player_base_url.rstrip('/'),
    )
    return env.get_template('episode.html').render(**context)


def render_about(feed: Feed) -> str:
    return env.get_template('about.html').render(**_context(feed, 'about'))


def render_site(feed: Feed, player_base_url: str = '') -> dict[str, str]:
    """
    Render every page of the site.

    Returns:
        Mapping of path relative to the output root -> HTML document
    """
    pages = {
        ROOT_PAGES['home']: render_home(feed),
        ROOT_PAGES['episodes']: render_episode_list(feed),
        ROOT_PAGES['about']: render_about(feed),
    }
    for episode in feed.episodes:
        pages[f"{constants.EPISODES_DIR}/{episode.filename}"] = render_episode(feed, episode, player_base_url)
    return pages
