"""Client for a social platform's hashtag API.

Provides:
- HashtagClient: configured entry point
- HashtagAPI: info, search (exclusion pagination), related, feed, story seen-marking
- SearchSession: caller-held state for paging through a search
"""

from .client import HashtagClient
from .config import HashtagClientConfig
from .exceptions import HashtagAPIError, InvalidArgumentError, RequestHeadersTooLargeError
from .hashtag import HashtagAPI
from .models import (
    HashtagSummary,
    OtherPayload,
    RelatedTags,
    SearchPage,
    SeenResult,
    StoryItem,
    StoryTray,
    TagFeed,
    TagInfo,
)
from .pagination import SearchSession
from .validation import generate_rank_token

__all__ = [
    "HashtagClient",
    "HashtagClientConfig",
    "HashtagAPI",
    "HashtagAPIError",
    "InvalidArgumentError",
    "RequestHeadersTooLargeError",
    "HashtagSummary",
    "OtherPayload",
    "RelatedTags",
    "SearchPage",
    "SeenResult",
    "StoryItem",
    "StoryTray",
    "TagFeed",
    "TagInfo",
    "SearchSession",
    "generate_rank_token",
]
