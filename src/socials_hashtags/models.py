"""Pydantic models for hashtag API responses.

Only the fields this client reads are declared. Anything else the server
sends is kept as extra attributes. Numeric ids are coerced to strings.
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base for all decoded payloads."""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class ApiResponse(ApiModel):
    """Top level response envelope."""

    status: str = "ok"
    message: Optional[str] = None


class TagInfo(ApiResponse):
    """Detailed metadata for one hashtag."""

    id: Optional[str] = None
    name: str = ""
    media_count: int = 0
    following: bool = False
    profile_pic_url: Optional[str] = None
    subtitle: Optional[str] = None


class HashtagSummary(ApiModel):
    """One hashtag in a search result page."""

    id: str
    name: str = ""
    media_count: int = 0
    search_result_subtitle: Optional[str] = None


class SearchPage(ApiResponse):
    """One page of hashtag search results.

    ``rank_token`` is assigned by the server on the first page and has to
    be echoed back unchanged on every later page of the same search.
    """

    results: list[HashtagSummary] = Field(default_factory=list)
    has_more: bool = False
    rank_token: Optional[str] = None

    @property
    def result_ids(self) -> list[str]:
        return [result.id for result in self.results]

    @classmethod
    def empty(cls, rank_token: str | None = None) -> "SearchPage":
        """Terminal page with no results."""
        return cls(results=[], has_more=False, rank_token=rank_token)


class RelatedTag(ApiModel):
    id: Optional[str] = None
    name: str = ""
    type: str = "hashtag"


class RelatedTags(ApiResponse):
    """Hashtags related to a given hashtag."""

    related: list[RelatedTag] = Field(default_factory=list)


class ItemUser(ApiModel):
    pk: str
    username: Optional[str] = None


class StoryItem(ApiModel):
    """A story media item as it appears in a story tray."""

    kind: Literal["tray_item"] = "tray_item"
    id: str
    pk: Optional[str] = None
    taken_at: int = 0
    media_type: Optional[int] = None
    user: Optional[ItemUser] = None


class OtherPayload(ApiModel):
    """Anything passed alongside story items that is not a tray item."""

    kind: Literal["other"] = "other"
    data: dict[str, Any] = Field(default_factory=dict)


# Entries accepted when marking story media as seen
StoryEntry = Union[StoryItem, OtherPayload]


class StoryTray(ApiModel):
    """Ephemeral story items tied to a hashtag."""

    id: str = ""
    items: list[StoryItem] = Field(default_factory=list)
    latest_reel_media: Optional[int] = None
    seen: Optional[int] = None

    @property
    def item_ids(self) -> set[str]:
        return {item.id for item in self.items}


class TagFeed(ApiResponse):
    """A page of the media feed for one hashtag."""

    items: list[dict[str, Any]] = Field(default_factory=list)
    ranked_items: list[dict[str, Any]] = Field(default_factory=list)
    story: Optional[StoryTray] = None
    num_results: int = 0
    more_available: bool = False
    next_max_id: Optional[str] = None
    auto_load_more_enabled: bool = False


class SeenResult(ApiResponse):
    """Answer to a "mark story media seen" request."""
