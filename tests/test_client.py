from unittest.mock import patch

import httpx
import pytest

from tests.conftest import make_session
from yt_fastmeta import constants as const
from yt_fastmeta.client import YtFastMeta
from yt_fastmeta.exceptions import (
    MetadataNotFoundError,
    SearchUnavailableError,
    VideoUnavailableError,
)
from yt_fastmeta.fields import NO_FIELDS, FieldSelection

VIDEO_URL = "https://www.youtube.com/watch?v=B68agR-OeJM"


@pytest.fixture
def mocked_client(mocker):
    """Provides a client whose session.get is a mock."""
    client = YtFastMeta()
    mock_get = mocker.patch.object(client.session, "get")
    yield client, mock_get
    client.close()


def test_ytfastmeta_initialization():
    """Test that YtFastMeta initializes correctly with and without a cache."""
    with YtFastMeta() as client_no_cache:
        assert client_no_cache.cache == {}

    my_cache = {"key": "value"}
    with YtFastMeta(cache=my_cache) as client_with_cache:
        assert client_with_cache.cache is my_cache
        assert client_with_cache._video_fetcher.cache is my_cache
        assert client_with_cache._search_fetcher.cache is my_cache


def test_get_video_metadata_defaults_to_all_fields(mocked_client, mocker, video_html):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text=video_html)

    metadata = client.get_video_metadata(VIDEO_URL)

    assert metadata.title == "Rock & Roll Lofi Mix"
    assert metadata.channel == "Chill & Co"
    assert metadata.views == "1234567"
    assert metadata.upload_date == "Jan 5, 2021"
    assert metadata.thumbnail.endswith("default.jpg")
    assert metadata.url == VIDEO_URL
    mock_get.assert_called_once()


def test_get_video_metadata_partial_selection(mocked_client, mocker, video_html):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text=video_html)

    metadata = client.get_video_metadata(VIDEO_URL, fields=FieldSelection(title=True))

    assert metadata.title == "Rock & Roll Lofi Mix"
    assert metadata.views is None
    assert metadata.to_dict() == {"title": "Rock & Roll Lofi Mix", "url": VIDEO_URL}


def test_get_video_metadata_not_found(mocked_client, mocker):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text="<html><body>consent wall</body></html>")

    with pytest.raises(MetadataNotFoundError) as excinfo:
        client.get_video_metadata(VIDEO_URL)

    assert excinfo.value.url == VIDEO_URL


def test_get_video_metadata_explicit_empty_selection_is_not_found(mocked_client, mocker, video_html):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text=video_html)

    with pytest.raises(MetadataNotFoundError):
        client.get_video_metadata(VIDEO_URL, fields=NO_FIELDS)


def test_video_unavailable_raises_error():
    session = make_session(lambda request: httpx.Response(404))
    client = YtFastMeta(session=session)

    with pytest.raises(VideoUnavailableError):
        client.get_video_metadata(VIDEO_URL)


def test_get_video_metadata_uses_cache(video_html):
    cache = {f"{const.CACHE_VIDEO_PAGE}{VIDEO_URL}": video_html}
    client = YtFastMeta(cache=cache)

    with patch.object(client.session, "get") as mock_get:
        metadata = client.get_video_metadata(VIDEO_URL, fields=FieldSelection(channel=True))

    assert metadata.channel == "Chill & Co"
    mock_get.assert_not_called()
    client.close()


def test_search_returns_unique_urls(mocked_client, mocker, search_html):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text=search_html)

    results = client.search("lofi chill", limit=3)

    assert results == [
        "https://www.youtube.com/watch?v=jfKfPfyJRdk",
        "https://www.youtube.com/watch?v=5qap5aO4i9A",
        "https://www.youtube.com/watch?v=DWcJFNfaw9c",
    ]
    _, kwargs = mock_get.call_args
    assert kwargs["params"] == {"search_query": "lofi chill"}


def test_search_rejects_non_positive_limit_without_fetching(mocked_client):
    client, mock_get = mocked_client

    with pytest.raises(ValueError):
        client.search("lofi", limit=0)

    mock_get.assert_not_called()


def test_search_empty_page_returns_empty_list(mocked_client, mocker):
    client, mock_get = mocked_client
    mock_get.return_value = mocker.Mock(status_code=200, text="<html></html>")

    assert client.search("nothing matches this") == []


def test_search_unavailable():
    client = YtFastMeta(session=make_session(lambda request: httpx.Response(503)))
    with pytest.raises(SearchUnavailableError):
        client.search("lofi")


def test_search_with_metadata_skips_failed_videos(search_html, video_html):
    def handler(request):
        if request.url.path == "/results":
            return httpx.Response(200, text=search_html)
        video_id = request.url.params["v"]
        if video_id == "jfKfPfyJRdk":
            return httpx.Response(200, text=video_html)
        if video_id == "5qap5aO4i9A":
            return httpx.Response(410)
        return httpx.Response(200, text="<html></html>")

    client = YtFastMeta(session=make_session(handler))
    records = list(client.search_with_metadata("lofi", limit=3, fields=FieldSelection(title=True)))

    assert len(records) == 1
    assert records[0].title == "Rock & Roll Lofi Mix"
    assert records[0].url == "https://www.youtube.com/watch?v=jfKfPfyJRdk"


def test_clear_cache_all():
    client = YtFastMeta()
    client.cache["key1"] = "value1"
    client.cache["key2"] = "value2"
    assert len(client.cache) == 2

    client.clear_cache()

    assert len(client.cache) == 0
    client.close()


def test_clear_cache_prefix():
    client = YtFastMeta()
    client.cache["video_page:123"] = "data1"
    client.cache["search_page:abc"] = "data2"
    client.cache["video_page:456"] = "data3"

    client.clear_cache(prefix=const.CACHE_VIDEO_PAGE)

    assert "video_page:123" not in client.cache
    assert "video_page:456" not in client.cache
    assert "search_page:abc" in client.cache
    assert len(client.cache) == 1
    client.close()


def test_close_leaves_caller_session_open():
    session = make_session(lambda request: httpx.Response(200))
    with YtFastMeta(session=session):
        pass
    assert not session.is_closed
    session.close()


@pytest.mark.integration
def test_get_video_metadata_integration(client):
    # "Me at the zoo" - a very stable video
    metadata = client.get_video_metadata("https://www.youtube.com/watch?v=jNQXAC9IVRw")
    assert metadata.title is not None


@pytest.mark.integration
def test_search_integration(client):
    results = client.search("lofi", limit=3)
    assert 0 < len(results) <= 3
