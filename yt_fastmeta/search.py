# yt_fastmeta/search.py

import logging
import re

from .constants import YOUTUBE_VIDEO_URL

logger = logging.getLogger(__name__)

WATCH_LINK_RE = re.compile(r'/watch\?v=([a-zA-Z0-9_-]{11})')


def check_limit(limit) -> None:
    """Raises ValueError unless `limit` is a positive int."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")


def extract_video_urls(page_text: str, limit: int) -> list[str]:
    """
    Collects unique watch URLs from a search results page.

    The page is scanned once from the top. Each video id is kept at the
    position where it first appears and later repeats are dropped. Scanning
    stops as soon as `limit` URLs have been collected.

    Args:
        page_text: The raw search results page.
        limit: Maximum number of URLs to return. Must be a positive int.

    Returns:
        A list of ``https://www.youtube.com/watch?v=<id>`` URLs.

    Raises:
        ValueError: If `limit` is not a positive integer.
    """
    check_limit(limit)

    seen = set()
    results = []
    for match in WATCH_LINK_RE.finditer(page_text):
        video_id = match.group(1)
        if video_id in seen:
            continue
        seen.add(video_id)
        results.append(YOUTUBE_VIDEO_URL.format(youtube_id=video_id))
        if len(results) >= limit:
            break

    logger.debug(f"Extracted {len(results)} unique video URLs (limit {limit})")
    return results
