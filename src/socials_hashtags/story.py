"""Marking hashtag story media as seen.

The server keys "seen" state by (item, source tray). Before anything is
sent, every tray item passed in is checked against the tray of the feed
response the caller says it came from. Items from another tray would
otherwise be recorded against the wrong source without any error.
"""

from __future__ import annotations

import json
import logging
import random
import time
from typing import Callable, Sequence

from .constants import MEDIA_SEEN_PATH
from .exceptions import InvalidArgumentError
from .log import API_LOGGER_NAME
from .models import SeenResult, StoryEntry, StoryItem, TagFeed
from .transport import ApiTransport

_api_logger = logging.getLogger(API_LOGGER_NAME)


def story_source_id(feed: TagFeed) -> str:
    """Story-tray id of a hashtag feed response.

    Raises:
        InvalidArgumentError: If the feed has no story tray or the tray has no id.
    """
    source_id = feed.story.id if feed.story is not None else ""
    if not source_id:
        raise InvalidArgumentError(
            "The given TagFeed response has no story-tray id."
        )
    return source_id


def validate_story_items(feed: TagFeed, items: Sequence[StoryEntry]) -> str:
    """Check that every tray item belongs to ``feed``'s story tray.

    Only ``StoryItem`` entries are checked. Other payloads pass through
    and are rejected by the seen request itself.

    Returns:
        The story-tray id to tag the seen request with.

    Raises:
        InvalidArgumentError: If the feed has no tray id, or an item is not
            in the tray.
    """
    source_id = story_source_id(feed)
    valid_ids = feed.story.item_ids

    for entry in items:
        if not isinstance(entry, StoryItem):
            continue
        if entry.id not in valid_ids:
            raise InvalidArgumentError(
                f'The item with ID "{entry.id}" does not belong to this TagFeed response.'
            )

    return source_id


class MediaSeenRequests:
    """Low-level "mark story items seen" call.

    Builds the ``reels`` map the server expects. Seen timestamps are spread
    a few seconds apart ending no later than now, the way a viewer moving
    through the tray would produce them.
    """

    def __init__(
        self,
        transport: ApiTransport,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ):
        self._transport = transport
        self._clock = clock
        self._rng = rng or random.Random()

    def build_reels(
        self,
        items: Sequence[StoryItem],
        source_id: str | None = None,
    ) -> dict[str, list[str]]:
        """Map ``<item>_<owner>[_<source>]`` to ``["<taken_at>_<seen_at>"]``."""
        max_seen_at = int(self._clock())
        seen_at = max_seen_at - 3 * len(items)

        reels: dict[str, list[str]] = {}
        for item in items:
            if item.user is None:
                raise InvalidArgumentError(f'Story item "{item.id}" has no owner.')

            if seen_at < item.taken_at:
                seen_at = item.taken_at + 2
            if seen_at > max_seen_at:
                seen_at = max_seen_at

            reel_id = f"{item.id}_{item.user.pk}"
            if source_id is not None:
                reel_id = f"{reel_id}_{source_id}"
            reels[reel_id] = [f"{item.taken_at}_{seen_at}"]

            seen_at += self._rng.randint(1, 3)

        return reels

    def mark_story_media_seen(
        self,
        items: Sequence[StoryEntry],
        source_id: str | None = None,
    ) -> SeenResult:
        """Record story items as seen, optionally tagged with a source tray.

        Raises:
            InvalidArgumentError: If no items are given or any entry is not a StoryItem.
            HashtagAPIError: If the request fails.
        """
        if not items:
            raise InvalidArgumentError("At least one story item is required.")
        for item in items:
            if not isinstance(item, StoryItem):
                raise InvalidArgumentError("All story entries must be StoryItem objects.")

        reels = self.build_reels(items, source_id)
        _api_logger.debug(f"MARK_SEEN | source={source_id} | items={len(reels)}")

        return (
            self._transport.request(MEDIA_SEEN_PATH)
            .add_param("reel", 1)
            .add_param("live_vod", 0)
            .add_post("container_module", "feed_timeline")
            .add_post("reels", json.dumps(reels, separators=(",", ":")))
            .get_response(SeenResult)
        )
