"""Shared test fixtures and configuration.

Two kinds of fake transport are provided:

- fake_transport: records ApiRequests and answers with queued dispatch
  outcomes, for testing request construction and result handling.
- mock_http: a real httpx.Client over httpx.MockTransport, for testing
  the httpx layer without a network.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from socials_hashtags.config import HashtagClientConfig
from socials_hashtags.models import StoryItem, StoryTray, TagFeed
from socials_hashtags.transport import ApiRequest
from socials_hashtags.types import DispatchResult, Success

TEST_BASE_URL = "https://api.test/api/v1/"


class FakeTransport:
    """Stands in for ApiTransport. Records every dispatched request."""

    def __init__(self) -> None:
        self.outcomes: list[DispatchResult] = []
        self.requests: list[ApiRequest] = []

    def queue(self, *outcomes: DispatchResult) -> None:
        self.outcomes.extend(outcomes)

    def request(self, path: str) -> ApiRequest:
        return ApiRequest(self, path)

    def send(self, api_request: ApiRequest) -> DispatchResult:
        self.requests.append(api_request)
        if self.outcomes:
            return self.outcomes.pop(0)
        return Success({"status": "ok"})

    @property
    def paths(self) -> list[str]:
        return [request.path for request in self.requests]


class RecordingHandler:
    """httpx MockTransport handler that records requests."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture
def fake_transport() -> FakeTransport:
    """Create a FakeTransport with no queued outcomes."""
    return FakeTransport()


@pytest.fixture
def test_config() -> HashtagClientConfig:
    """Configuration pointing at a fake host."""
    return HashtagClientConfig(base_url=TEST_BASE_URL, session_id="secret-session")


@pytest.fixture
def make_config() -> Callable[..., HashtagClientConfig]:
    """Factory for a configuration pointing at the fake host, with overrides."""
    def _make(**overrides: Any) -> HashtagClientConfig:
        return HashtagClientConfig(base_url=TEST_BASE_URL, **overrides)

    return _make


@pytest.fixture
def mock_http() -> Callable[..., tuple[httpx.Client, RecordingHandler]]:
    """Factory for an httpx.Client answering through a responder function.

    Usage:
        client, handler = mock_http(lambda request: httpx.Response(200, json={}))
    """
    def _make(responder: Callable[[httpx.Request], httpx.Response]):
        handler = RecordingHandler(responder)
        client = httpx.Client(base_url=TEST_BASE_URL, transport=httpx.MockTransport(handler))
        return client, handler

    return _make


def make_feed(tray_id: str = "T1", item_ids: tuple[str, ...] = ("a", "b", "c")) -> TagFeed:
    """Build a TagFeed whose story tray holds the given item ids."""
    return TagFeed(
        story=StoryTray(
            id=tray_id,
            items=[StoryItem(id=item_id, taken_at=900, user={"pk": "42"}) for item_id in item_ids],
        ),
    )


@pytest.fixture
def sample_feed() -> TagFeed:
    """Feed with story tray "T1" holding items a, b, c."""
    return make_feed()


@pytest.fixture
def search_payload() -> dict[str, Any]:
    """A first page of hashtag search results."""
    return {
        "status": "ok",
        "has_more": True,
        "rank_token": "rank-abc",
        "results": [
            {"id": 17841562498105353, "name": "python", "media_count": 12000000},
            {"id": 17843826142012701, "name": "pythonprogramming", "media_count": 900000},
        ],
    }


@pytest.fixture
def feed_factory() -> Callable[..., TagFeed]:
    """Factory for feeds with a chosen tray id and item ids."""
    return make_feed
