from pathlib import Path

import httpx
import pytest

from yt_fastmeta import YtFastMeta

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def get_fixture_path(filename):
    """Returns the absolute path to a fixture file."""
    return FIXTURES_DIR / filename


def get_fixture(filename):
    """Reads and returns the content of a fixture file."""
    with open(get_fixture_path(filename), "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def video_html():
    return get_fixture("video_page.html")


@pytest.fixture
def search_html():
    return get_fixture("search_results.html")


def make_session(handler):
    """Builds an httpx.Client whose requests are answered by `handler`."""
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def client():
    """Provides a YtFastMeta client for integration tests."""
    with YtFastMeta() as c:
        yield c
