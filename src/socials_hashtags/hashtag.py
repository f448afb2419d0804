"""Finding and exploring hashtags."""

from __future__ import annotations

from typing import Iterator, Sequence

from .constants import (
    DEFAULT_SEARCH_COUNT,
    RELATED_TYPES,
    TAG_FEED_PATH,
    TAG_INFO_PATH,
    TAG_RELATED_PATH,
    TAG_SEARCH_PATH,
)
from .models import RelatedTags, SearchPage, SeenResult, StoryEntry, TagFeed, TagInfo
from .pagination import (
    TIMEZONE_OFFSET,
    SearchSession,
    fetch_search_page,
    paginate_with_exclusion,
)
from .story import MediaSeenRequests, validate_story_items
from .transport import ApiTransport
from .validation import (
    encode_hashtag,
    validate_exclude_ids,
    validate_hashtag_text,
    validate_query_text,
    validate_rank_token,
)


class HashtagAPI:
    """Hashtag info, search, related tags, feeds and story seen-marking.

    Stateless between calls. Pagination state (rank token, exclusion
    list, max id) is always supplied by the caller.
    """

    def __init__(
        self,
        transport: ApiTransport,
        media_seen: MediaSeenRequests,
        search_count: int = DEFAULT_SEARCH_COUNT,
    ):
        self._transport = transport
        self._media_seen = media_seen
        self.search_count = search_count

    def get_info(self, hashtag: str) -> TagInfo:
        """Get detailed hashtag information.

        Args:
            hashtag: The hashtag, not including the "#".
        """
        validate_hashtag_text(hashtag)
        path = TAG_INFO_PATH.format(hashtag=encode_hashtag(hashtag))
        return self._transport.request(path).get_response(TagInfo)

    def search(
        self,
        query: str,
        exclude_ids: Sequence[str | int] = (),
        rank_token: str | None = None,
    ) -> SearchPage:
        """Search for hashtags, best matches first.

        Further pages are fetched by excluding the numeric ids of every tag
        already received. The server never excludes a tag that exactly
        matches the query, even if its id is in the list.

        Once the exclusion list is too large to send, an empty page with
        ``has_more=False`` is returned instead of an error.

        Args:
            query: Free text to match; does not need to be a valid hashtag.
            exclude_ids: Numeric hashtag ids (e.g. "17841562498105353") to skip.
            rank_token: Token from the FIRST page of this search, when paginating.

        Raises:
            InvalidArgumentError: Empty query, malformed ids or rank token.
            HashtagAPIError: Any remote failure other than the size limit.
        """
        validate_query_text(query)
        excluded = validate_exclude_ids(exclude_ids)
        validate_rank_token(rank_token, required=False)

        request = paginate_with_exclusion(
            self._transport.request(TAG_SEARCH_PATH)
            .add_param("q", query)
            .add_param("timezone_offset", TIMEZONE_OFFSET),
            excluded,
            rank_token,
            self.search_count,
        )
        return fetch_search_page(request, rank_token, excluded=len(excluded))

    def search_pages(
        self,
        session: SearchSession,
        max_pages: int | None = None,
    ) -> Iterator[SearchPage]:
        """Yield successive search pages, updating ``session`` after each.

        Stops when the server reports no more results, a page comes back
        empty, or ``max_pages`` pages have been fetched in this call.
        """
        fetched = 0
        while session.has_more and (max_pages is None or fetched < max_pages):
            page = self.search(session.query, session.exclude_ids, session.rank_token)
            session.record(page)
            fetched += 1
            yield page

    def get_related(self, hashtag: str) -> RelatedTags:
        """Get hashtags related to ``hashtag``.

        Args:
            hashtag: The hashtag, not including the "#".
        """
        validate_hashtag_text(hashtag)
        path = TAG_RELATED_PATH.format(hashtag=encode_hashtag(hashtag))
        return (
            self._transport.request(path)
            .add_param("visited", [{"id": hashtag, "type": "hashtag"}])
            .add_param("related_types", RELATED_TYPES)
            .get_response(RelatedTags)
        )

    def get_feed(
        self,
        hashtag: str,
        rank_token: str,
        max_id: str | None = None,
    ) -> TagFeed:
        """Get the media feed for a hashtag.

        Args:
            hashtag: The hashtag, not including the "#".
            rank_token: Feed session token; use the same value for every page.
            max_id: Next "maximum id" from the previous page, sent as-is.
        """
        validate_hashtag_text(hashtag)
        validate_rank_token(rank_token)
        path = TAG_FEED_PATH.format(hashtag=encode_hashtag(hashtag))

        request = self._transport.request(path).add_param("rank_token", rank_token)
        if max_id is not None:
            request.add_param("max_id", max_id)

        return request.get_response(TagFeed)

    def mark_story_media_seen(
        self,
        feed: TagFeed,
        items: Sequence[StoryEntry],
    ) -> SeenResult:
        """Mark story items from a hashtag feed as seen.

        ``feed.story`` only lists story media; viewing them does not mark
        them seen. This call does, and it also stops the server from
        serving the same stories again for that hashtag.

        Tip: pass ``feed.story.items`` to mark the whole tray as seen.

        Args:
            feed: The exact feed response the items came from.
            items: One or more story items from that feed's tray.

        Raises:
            InvalidArgumentError: If the feed has no story tray id, or an
                item is not part of its tray. Nothing is sent in that case.
        """
        source_id = validate_story_items(feed, items)
        return self._media_seen.mark_story_media_seen(items, source_id)
