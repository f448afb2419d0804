"""Endpoint paths and request constants.

Paths are relative to the configured API base URL. Hashtag text is
percent-encoded before it is substituted into any of the path templates.
"""

# Hashtag endpoints
TAG_INFO_PATH: str = "tags/{hashtag}/info/"
TAG_SEARCH_PATH: str = "tags/search/"
TAG_RELATED_PATH: str = "tags/{hashtag}/related/"
TAG_FEED_PATH: str = "feed/tag/{hashtag}/"

# Story "seen" endpoint
MEDIA_SEEN_PATH: str = "media/seen/"

# Default number of search results requested per page
DEFAULT_SEARCH_COUNT: int = 30

# Only hashtags are requested from the related endpoint
RELATED_TYPES: list[str] = ["hashtag"]

# HTTP status codes the server uses when a request line or header block is too big
HEADERS_TOO_LARGE_STATUS_CODES: frozenset[int] = frozenset({414, 431})

DEFAULT_BASE_URL: str = "https://i.instagram.com/api/v1/"
DEFAULT_USER_AGENT: str = (
    "Instagram 275.0.0.27.98 Android "
    "(33/13; 420dpi; 1080x2400; samsung; SM-G991B; o1s; exynos2100; en_US; 458229237)"
)
