# yt_fastmeta/exceptions.py


class YtFastMetaError(Exception):
    """Base exception for all errors raised by yt_fastmeta."""


class UpstreamFetchError(YtFastMetaError):
    """Raised when YouTube could not be reached or answered with a non-2xx status."""

    def __init__(self, message, url=None, status_code=None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class VideoUnavailableError(UpstreamFetchError):
    """Raised when a video page cannot be fetched."""


class SearchUnavailableError(UpstreamFetchError):
    """Raised when a search results page cannot be fetched."""


class MetadataParsingError(YtFastMetaError):
    """Raised when a response body cannot be used at all, e.g. it is empty."""

    def __init__(self, message, url=None):
        super().__init__(message)
        self.url = url


class NotFoundError(YtFastMetaError):
    """A request succeeded but produced nothing usable."""


class MetadataNotFoundError(NotFoundError):
    def __init__(self, message, url=None, fields=None):
        super().__init__(message)
        self.url = url
        self.fields = fields


class NoSearchResultsError(NotFoundError):
    def __init__(self, message, query=None):
        super().__init__(message)
        self.query = query
