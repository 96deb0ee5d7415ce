# yt_fastmeta/__init__.py

from .client import YtFastMeta
from .date_utils import parse_upload_date
from .exceptions import (
    MetadataNotFoundError,
    MetadataParsingError,
    NoSearchResultsError,
    NotFoundError,
    SearchUnavailableError,
    UpstreamFetchError,
    VideoUnavailableError,
    YtFastMetaError,
)
from .extraction import EXTRACTION_RULES, ExtractionRule, VideoMetadata, extract_metadata, is_found
from .fields import NO_FIELDS, FieldSelection, parse_fields
from .search import extract_video_urls

__version__ = "0.1.0"

__all__ = [
    "YtFastMeta",
    "FieldSelection",
    "NO_FIELDS",
    "parse_fields",
    "ExtractionRule",
    "EXTRACTION_RULES",
    "VideoMetadata",
    "extract_metadata",
    "is_found",
    "extract_video_urls",
    "parse_upload_date",
    "YtFastMetaError",
    "UpstreamFetchError",
    "VideoUnavailableError",
    "SearchUnavailableError",
    "MetadataParsingError",
    "NotFoundError",
    "MetadataNotFoundError",
    "NoSearchResultsError",
]
