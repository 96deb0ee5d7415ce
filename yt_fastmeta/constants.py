# yt_fastmeta/constants.py

USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/79.0.3945.130 Safari/537.36'
DEFAULT_TIMEOUT = 10

YOUTUBE_VIDEO_URL = 'https://www.youtube.com/watch?v={youtube_id}'
YOUTUBE_SEARCH_URL = 'https://www.youtube.com/results'

# Cache key prefixes
CACHE_VIDEO_PAGE = "video_page:"
CACHE_SEARCH_PAGE = "search_page:"
