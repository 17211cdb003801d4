from pathlib import Path

import pytest

from podarchive.feed_parser import parse_feed


@pytest.fixture(scope="session")
def test_feeds_dir():
    """Provide path to test feeds directory."""
    return Path(__file__).parent / "test_feeds"


@pytest.fixture(scope="session")
def sample_feed_path(test_feeds_dir):
    return test_feeds_dir / "survivor.rss"


@pytest.fixture(scope="session")
def sample_feed_text(sample_feed_path):
    return sample_feed_path.read_text(encoding="utf-8")


@pytest.fixture
def sample_feed(sample_feed_text):
    return parse_feed(sample_feed_text)


@pytest.fixture(scope="session")
def prefect_harness():
    """Temporary Prefect backend for tests that run whole flows."""
    from prefect.testing.utilities import prefect_test_harness

    with prefect_test_harness():
        yield
