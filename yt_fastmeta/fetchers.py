"""
HTTP access to YouTube.

These classes only fetch page text; all decisions about the content are made
in `extraction` and `search`. Successful responses are kept in the shared
cache dict so repeated lookups do not hit the network.
"""
import logging
from typing import Optional

import httpx

from . import constants as const
from .exceptions import MetadataParsingError, SearchUnavailableError, VideoUnavailableError

logger = logging.getLogger(__name__)


class _PageFetcher:
    def __init__(self, session: httpx.Client, cache: dict, timeout: float = const.DEFAULT_TIMEOUT):
        self.session = session
        self.cache = cache
        self.timeout = timeout
        self.logger = logger

    def _get_text(self, url: str, params: Optional[dict] = None) -> str:
        """GETs a page and returns its text. Errors propagate from httpx."""
        response = self.session.get(url, params=params, timeout=self.timeout, follow_redirects=True)
        response.raise_for_status()
        return response.text


class VideoFetcher(_PageFetcher):
    def fetch_page(self, youtube_url: str, force_refresh: bool = False) -> str:
        """
        Fetches the watch page for `youtube_url`.

        Raises:
            VideoUnavailableError: On transport errors or a non-2xx status.
            MetadataParsingError: If the page body is empty.
        """
        key = f"{const.CACHE_VIDEO_PAGE}{youtube_url}"
        if not force_refresh and key in self.cache:
            self.logger.info(f"Using cached page for video: {youtube_url}")
            return self.cache[key]

        try:
            self.logger.info(f"Fetching video page: {youtube_url}")
            html = self._get_text(youtube_url)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self.logger.error(f"Video page {youtube_url} returned status {status}")
            raise VideoUnavailableError(
                f"Unexpected status code {status} for video page", url=youtube_url, status_code=status
            ) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Failed to fetch video page {youtube_url}: {e}")
            raise VideoUnavailableError(f"Failed to fetch video page: {e}", url=youtube_url) from e

        if not html:
            raise MetadataParsingError("Video page response body is empty.", url=youtube_url)

        self.cache[key] = html
        return html


class SearchFetcher(_PageFetcher):
    def fetch_results_page(self, query: str, force_refresh: bool = False) -> str:
        """
        Fetches the first results page for a keyword search.

        Raises:
            ValueError: If the query is empty.
            SearchUnavailableError: On transport errors or a non-2xx status.
        """
        query = (query or "").strip()
        if not query:
            raise ValueError("Search query must not be empty.")

        key = f"{const.CACHE_SEARCH_PAGE}{query}"
        if not force_refresh and key in self.cache:
            self.logger.info(f"Using cached results page for query: {query!r}")
            return self.cache[key]

        try:
            self.logger.info(f"Fetching search results for query: {query!r}")
            html = self._get_text(const.YOUTUBE_SEARCH_URL, params={"search_query": query})
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            self.logger.error(f"Search for {query!r} returned status {status}")
            raise SearchUnavailableError(
                f"Unexpected status code {status} for search page",
                url=const.YOUTUBE_SEARCH_URL,
                status_code=status,
            ) from e
        except httpx.HTTPError as e:
            self.logger.error(f"Failed to fetch search results for {query!r}: {e}")
            raise SearchUnavailableError(f"Failed to fetch search page: {e}", url=const.YOUTUBE_SEARCH_URL) from e

        self.cache[key] = html
        return html
