"""Tests for exclusion-based search pagination.

Tests cover:
- Exclusion list formatting and parameter injection
- Size-limit degradation to an empty terminal page
- Propagation of every other failure
- SearchSession bookkeeping
"""

import pytest

from socials_hashtags.exceptions import HashtagAPIError, RequestHeadersTooLargeError
from socials_hashtags.models import SearchPage
from socials_hashtags.pagination import (
    TIMEZONE_OFFSET,
    SearchSession,
    fetch_search_page,
    format_exclude_list,
    paginate_with_exclusion,
)
from socials_hashtags.types import Failure, Success, TooLarge


class TestFormatExcludeList:
    """Test format_exclude_list."""

    def test_single_id(self):
        """One id renders inside brackets."""
        assert format_exclude_list(["17841562498105353"]) == "[17841562498105353]"

    def test_keeps_caller_order(self):
        """Ids are not sorted."""
        assert format_exclude_list(["3", "1", "2"]) == "[3, 1, 2]"


class TestPaginateWithExclusion:
    """Test paginate_with_exclusion."""

    def test_first_page_has_only_count(self, fake_transport):
        """No exclusions or token means only count is added."""
        request = paginate_with_exclusion(fake_transport.request("tags/search/"), [], None, 30)

        assert request.params == {"count": "30"}

    def test_exclusions_and_rank_token_added(self, fake_transport):
        """Exclusions and token are added when present."""
        request = paginate_with_exclusion(
            fake_transport.request("tags/search/"), ["111", "222"], "rank-abc", 10
        )

        assert request.params == {
            "count": "10",
            "exclude_list": "[111, 222]",
            "rank_token": "rank-abc",
        }

    def test_rank_token_without_exclusions(self, fake_transport):
        """A token alone is still sent."""
        request = paginate_with_exclusion(fake_transport.request("tags/search/"), [], "rank-abc", 30)

        assert "exclude_list" not in request.params
        assert request.params["rank_token"] == "rank-abc"


class TestFetchSearchPage:
    """Test fetch_search_page outcome handling."""

    def test_success_decodes_page(self, fake_transport, search_payload):
        """A Success outcome decodes into a SearchPage."""
        fake_transport.queue(Success(search_payload))

        page = fetch_search_page(fake_transport.request("tags/search/"), None)

        assert page.has_more is True
        assert page.rank_token == "rank-abc"
        assert page.result_ids == ["17841562498105353", "17843826142012701"]

    def test_too_large_returns_empty_terminal_page(self, fake_transport):
        """TooLarge becomes an empty page with the caller's token."""
        fake_transport.queue(TooLarge(RequestHeadersTooLargeError()))

        page = fetch_search_page(fake_transport.request("tags/search/"), "rank-abc", excluded=500)

        assert page.results == []
        assert page.has_more is False
        assert page.rank_token == "rank-abc"

    def test_too_large_without_token(self, fake_transport):
        """The terminal page has no token if none was given."""
        fake_transport.queue(TooLarge(RequestHeadersTooLargeError()))

        page = fetch_search_page(fake_transport.request("tags/search/"), None)

        assert page.rank_token is None
        assert page.has_more is False

    def test_other_failure_propagates_unchanged(self, fake_transport):
        """Failure outcomes raise their error object."""
        error = HashtagAPIError("login_required", status_code=403, payload={"status": "fail"})
        fake_transport.queue(Failure(error))

        with pytest.raises(HashtagAPIError) as exc_info:
            fetch_search_page(fake_transport.request("tags/search/"), "rank-abc")

        assert exc_info.value is error

    def test_malformed_page_raises(self, fake_transport):
        """A body that is not a SearchPage raises HashtagAPIError."""
        fake_transport.queue(Success({"results": [{"name": "no id"}]}))

        with pytest.raises(HashtagAPIError):
            fetch_search_page(fake_transport.request("tags/search/"), None)


class TestTimezoneOffset:
    """Test the computed timezone offset."""

    def test_is_whole_seconds_within_a_day(self):
        """Offset is an int under one day."""
        assert isinstance(TIMEZONE_OFFSET, int)
        assert -86400 < TIMEZONE_OFFSET < 86400


class TestSearchSession:
    """Test SearchSession bookkeeping."""

    def test_new_session_defaults(self):
        """A fresh session has no token or exclusions."""
        session = SearchSession(query="py")

        assert session.rank_token is None
        assert session.exclude_ids == []
        assert session.has_more is True
        assert session.pages_fetched == 0

    def test_record_pins_first_rank_token(self):
        """Later tokens never replace the first one."""
        session = SearchSession(query="py")
        session.record(SearchPage(results=[{"id": "1"}], has_more=True, rank_token="first"))
        session.record(SearchPage(results=[{"id": "2"}], has_more=True, rank_token="second"))

        assert session.rank_token == "first"

    def test_record_appends_ids_in_order_without_duplicates(self):
        """Result ids are appended once each, in order."""
        session = SearchSession(query="py")
        session.record(SearchPage(results=[{"id": "1"}, {"id": "2"}], has_more=True, rank_token="t"))
        session.record(SearchPage(results=[{"id": "2"}, {"id": "3"}], has_more=True, rank_token="t"))

        assert session.exclude_ids == ["1", "2", "3"]
        assert session.pages_fetched == 2

    def test_seeded_ids_are_not_repeated(self):
        """Ids passed in at construction count as already excluded."""
        session = SearchSession(query="py", exclude_ids=["1", "2"])
        session.record(SearchPage(results=[{"id": "2"}, {"id": "3"}, {"id": "3"}], has_more=True, rank_token="t"))

        assert session.exclude_ids == ["1", "2", "3"]

    def test_empty_page_ends_session(self):
        """An empty page ends the session."""
        session = SearchSession(query="py")
        session.record(SearchPage(results=[], has_more=True, rank_token="t"))

        assert session.has_more is False

    def test_has_more_false_ends_session(self):
        """has_more=False ends the session."""
        session = SearchSession(query="py")
        session.record(SearchPage(results=[{"id": "1"}], has_more=False, rank_token="t"))

        assert session.has_more is False
