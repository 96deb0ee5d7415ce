"""
Parsing of the client-side field list into a `FieldSelection`.

The selector returns exactly what was asked for. Deciding what an empty
request means ("all fields" or "nothing") is left to the caller; see
`yt_fastmeta.cli.DEFAULT_FIELDS`.
"""
import logging
from dataclasses import dataclass, fields as dataclass_fields
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

# Accepted (lower-cased) names mapped to FieldSelection attributes.
FIELD_NAMES = {
    "title": "title",
    "channel": "channel",
    "views": "views",
    "uploaddate": "upload_date",
    "description": "description",
    "thumbnail": "thumbnail",
}


@dataclass(frozen=True)
class FieldSelection:
    title: bool = False
    channel: bool = False
    views: bool = False
    upload_date: bool = False
    description: bool = False
    thumbnail: bool = False

    @classmethod
    def all(cls) -> "FieldSelection":
        return cls(**{f.name: True for f in dataclass_fields(cls)})

    def enabled(self) -> Iterator[str]:
        """Yields the names of the enabled fields in declaration order."""
        for f in dataclass_fields(self):
            if getattr(self, f.name):
                yield f.name

    def is_empty(self) -> bool:
        return self == NO_FIELDS


NO_FIELDS = FieldSelection()


def parse_fields(field_list: Optional[str]) -> FieldSelection:
    """
    Parses a comma separated list such as ``"title, Views"``.

    Names are case-insensitive and surrounding whitespace is ignored.
    Unknown names are skipped. `None` or an empty string yields `NO_FIELDS`.
    """
    if not field_list:
        return NO_FIELDS

    selected = {}
    for part in field_list.split(","):
        name = part.strip().lower()
        if not name:
            continue
        attr = FIELD_NAMES.get(name)
        if attr is None:
            logger.debug(f"Ignoring unknown field name: {name!r}")
            continue
        selected[attr] = True

    return FieldSelection(**selected)
