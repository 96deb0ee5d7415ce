# yt_fastmeta/date_utils.py

import logging
import re
from datetime import date, datetime
from typing import Optional

import dateparser

logger = logging.getLogger(__name__)

# Wording YouTube puts in front of the actual date in "dateText".
_DATE_PREFIX_RE = re.compile(
    r"^(?:premiered|streamed live on|streamed live|started streaming on|scheduled for)\s+",
    re.IGNORECASE,
)


def parse_upload_date(date_text: Optional[str], relative_to: Optional[datetime] = None) -> Optional[date]:
    """
    Turns a scraped upload date such as "Jan 5, 2021", "Premiered Mar 3, 2022"
    or "3 days ago" into a date object.

    Returns None if the text is empty or cannot be understood.
    """
    if not date_text:
        return None

    cleaned = _DATE_PREFIX_RE.sub("", date_text.strip())
    settings = {"PREFER_DATES_FROM": "past"}
    if relative_to is not None:
        settings["RELATIVE_BASE"] = relative_to

    parsed = dateparser.parse(cleaned, settings=settings)
    if parsed is None:
        logger.debug(f"Could not parse upload date: {date_text!r}")
        return None
    return parsed.date()
