# yt_fastmeta/client.py

import logging
from typing import Generator, Optional

import httpx

from . import constants as const
from .exceptions import MetadataNotFoundError, MetadataParsingError, VideoUnavailableError
from .extraction import VideoMetadata, extract_metadata, is_found
from .fetchers import SearchFetcher, VideoFetcher
from .fields import FieldSelection
from .search import check_limit, extract_video_urls

logger = logging.getLogger(__name__)


class YtFastMeta:
    """
    A client for scraping YouTube video metadata and search results.

    Page fetching is done over a single `httpx.Client`; the scraping itself
    works on the raw page text and needs no API key. Fetched pages are kept
    in an in-memory cache (a plain dict, which can be supplied by the caller)
    so repeated lookups of the same video or query are free.
    """

    def __init__(
        self,
        session: Optional[httpx.Client] = None,
        cache: Optional[dict] = None,
        timeout: float = const.DEFAULT_TIMEOUT,
    ):
        self._owns_session = session is None
        self.session = session or httpx.Client(headers={"User-Agent": const.USER_AGENT})
        self.cache = cache if cache is not None else {}
        self.logger = logger
        self._video_fetcher = VideoFetcher(session=self.session, cache=self.cache, timeout=timeout)
        self._search_fetcher = SearchFetcher(session=self.session, cache=self.cache, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Closes the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def clear_cache(self, prefix: str = None):
        """
        Clears the page cache.

        If a `prefix` is given (e.g. ``"video_page:"``), only keys starting
        with it are removed. Otherwise the entire cache is cleared.
        """
        if prefix:
            for key in [k for k in self.cache if k.startswith(prefix)]:
                del self.cache[key]
            self.logger.info(f"Cache cleared for prefix: {prefix}")
        else:
            self.cache.clear()
            self.logger.info("Entire page cache cleared.")

    def get_video_metadata(
        self,
        youtube_url: str,
        fields: Optional[FieldSelection] = None,
        force_refresh: bool = False,
    ) -> VideoMetadata:
        """
        Fetches a video page and scrapes the requested fields from it.

        Args:
            youtube_url: The full URL of the YouTube video.
            fields: Which fields to extract. None means every field. An
                explicit empty selection is honoured and ends in
                `MetadataNotFoundError`.
            force_refresh: If True, bypasses the page cache.

        Returns:
            A `VideoMetadata` record. Fields that were not requested or not
            found are None.

        Raises:
            VideoUnavailableError: If the page could not be fetched.
            MetadataParsingError: If the page body was empty.
            MetadataNotFoundError: If none of the requested fields were found.
        """
        if fields is None:
            fields = FieldSelection.all()

        html = self._video_fetcher.fetch_page(youtube_url, force_refresh=force_refresh)
        metadata = extract_metadata(html, fields, url=youtube_url)

        if not is_found(metadata, fields):
            self.logger.warning(f"No metadata found for {youtube_url} (fields: {list(fields.enabled())})")
            raise MetadataNotFoundError("No metadata found for the provided URL.", url=youtube_url, fields=fields)

        return metadata

    def search(self, query: str, limit: int = 1, force_refresh: bool = False) -> list[str]:
        """
        Runs a keyword search and returns up to `limit` unique watch URLs.

        Only the first results page is used, so fewer than `limit` URLs may
        come back. An empty list means nothing was found.

        Raises:
            ValueError: If the query is empty or `limit` is not positive.
            SearchUnavailableError: If the results page could not be fetched.
        """
        # Validate before touching the network.
        check_limit(limit)

        html = self._search_fetcher.fetch_results_page(query, force_refresh=force_refresh)
        results = extract_video_urls(html, limit)
        self.logger.info(f"Search for {query!r} returned {len(results)} result(s)")
        return results

    def search_with_metadata(
        self,
        query: str,
        limit: int = 1,
        fields: Optional[FieldSelection] = None,
    ) -> Generator[VideoMetadata, None, None]:
        """
        A generator that searches and then yields metadata for each result.

        Note:
            This triggers one additional request per search result. Results
            whose page cannot be fetched or has none of the requested fields
            are skipped with a warning.
        """
        for url in self.search(query, limit=limit):
            try:
                yield self.get_video_metadata(url, fields=fields)
            except (VideoUnavailableError, MetadataParsingError, MetadataNotFoundError) as e:
                self.logger.warning(f"Skipping video {url}: {e}")
                continue
