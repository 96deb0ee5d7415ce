"""
Metadata extraction from a raw YouTube watch page.

The page is never parsed as JSON. Each field has an ordered list of
`ExtractionRule`s (see `EXTRACTION_RULES`) matched against the raw text, so
that partially broken or truncated pages still yield whatever can be found.
The first rule producing a non-empty value wins.
"""
import html
import logging
import re
from dataclasses import dataclass, fields as dataclass_fields
from typing import Callable, Optional

from .fields import FieldSelection

logger = logging.getLogger(__name__)


def _strip_thousands(value: str) -> str:
    return value.replace(",", "")


@dataclass(frozen=True)
class ExtractionRule:
    """A pattern with one capture group plus an optional post-processor."""

    pattern: re.Pattern
    postprocess: Optional[Callable[[str], str]] = None

    def apply(self, text: str) -> Optional[str]:
        # Only the first occurrence counts; an empty capture is a miss.
        match = self.pattern.search(text)
        if not match or not match.group(1):
            return None
        value = match.group(1)
        if self.postprocess:
            value = self.postprocess(value)
        return value


def _rule(pattern: str, postprocess=None) -> ExtractionRule:
    return ExtractionRule(re.compile(pattern), postprocess)


# Order within each tuple is precedence order.
EXTRACTION_RULES = {
    "title": (
        _rule(r'"title":\{"runs":\[\{"text":"(.*?)"\}', html.unescape),
    ),
    "channel": (
        _rule(r'"ownerChannelName":"(.*?)"', html.unescape),
        _rule(r'"channelName":\{"simpleText":"(.*?)"', html.unescape),
    ),
    "views": (
        _rule(r'"viewCount":"([0-9]+)"'),
        _rule(r'"viewCountText":\{"simpleText":"([0-9,]+) views"', _strip_thousands),
        _rule(r'"shortViewCountText":\{"simpleText":"(.*?) views"'),
    ),
    "upload_date": (
        _rule(r'"dateText":\{"simpleText":"(.*?)"'),
    ),
    "description": (
        _rule(r'"description":\{"simpleText":"(.*?)"', html.unescape),
    ),
    "thumbnail": (
        _rule(r'"thumbnail":\{"thumbnails":\[\{"url":"(.*?)"'),
    ),
}


@dataclass(frozen=True)
class VideoMetadata:
    title: Optional[str] = None
    channel: Optional[str] = None
    views: Optional[str] = None
    upload_date: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    url: Optional[str] = None

    def to_dict(self) -> dict:
        """
        Returns the record as a JSON-ready dict.

        Keys are camelCase (``uploadDate``) and empty fields are omitted.
        """
        data = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if value:
                data[_camel_case(f.name)] = value
        return data


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def extract_field(page_text: str, field: str) -> Optional[str]:
    """Runs the rules for a single field and returns the first hit, if any."""
    for index, rule in enumerate(EXTRACTION_RULES[field]):
        value = rule.apply(page_text)
        if value:
            logger.debug(f"Field '{field}' matched rule #{index}")
            return value
    logger.debug(f"Field '{field}' not found in page")
    return None


def extract_metadata(page_text: str, selection: FieldSelection, url: Optional[str] = None) -> VideoMetadata:
    """
    Extracts the fields enabled in `selection` from a watch page.

    Fields that are not enabled are left as None even when the page has
    them, so None means "not requested or not found".

    Args:
        page_text: The raw page markup or script payload.
        selection: Which fields to look for.
        url: Echoed back on the returned record.

    Returns:
        A `VideoMetadata` record. Never raises for missing fields.
    """
    values = {field: extract_field(page_text, field) for field in selection.enabled()}
    return VideoMetadata(url=url, **values)


def is_found(record: VideoMetadata, selection: FieldSelection) -> bool:
    """
    True if at least one field enabled in `selection` has a value.

    An empty selection is never "found".
    """
    return any(getattr(record, field) for field in selection.enabled())
