"""Exclusion-based pagination for hashtag search.

Hashtag search has no server cursor. A caller gets the next page by
sending the ids of every tag it has already seen, together with the rank
token from the first page. The exclusion list grows each round and
eventually no longer fits in the request; at that point the search is
over and an empty terminal page is returned instead of an error.

All pagination state lives with the caller, either passed in directly or
held in a SearchSession the caller owns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from .log import API_LOGGER_NAME
from .models import SearchPage
from .transport import ApiRequest, decode_response
from .types import Success, TooLarge

_api_logger = logging.getLogger(API_LOGGER_NAME)


def _local_utc_offset_seconds() -> int:
    offset = datetime.now().astimezone().utcoffset()
    return int(offset.total_seconds()) if offset is not None else 0


# Computed once per process
TIMEZONE_OFFSET: int = _local_utc_offset_seconds()


def format_exclude_list(exclude_ids: Sequence[str]) -> str:
    """Render ids as ``[id1, id2, ...]`` in caller order."""
    return "[" + ", ".join(exclude_ids) + "]"


def paginate_with_exclusion(
    request: ApiRequest,
    exclude_ids: Sequence[str],
    rank_token: str | None,
    count: int,
) -> ApiRequest:
    """Add page size, exclusion list and rank token to a search request.

    Args:
        request: Request already carrying the query parameters.
        exclude_ids: Validated numeric ids to leave out. May be empty.
        rank_token: Token from the first page, or None on the first call.
        count: Results wanted per page.

    Returns:
        The same request, for chaining.
    """
    request.add_param("count", count)
    if exclude_ids:
        request.add_param("exclude_list", format_exclude_list(exclude_ids))
    if rank_token is not None:
        request.add_param("rank_token", rank_token)
    return request


def fetch_search_page(
    request: ApiRequest,
    rank_token: str | None,
    excluded: int = 0,
) -> SearchPage:
    """Dispatch a prepared search request and interpret the outcome.

    A too-large request ends the search with an empty page carrying the
    caller's rank token. Every other failure is raised unchanged.

    Args:
        request: Request built by paginate_with_exclusion.
        rank_token: Token the caller passed in (None on the first page).
        excluded: Number of excluded ids, for the log.
    """
    outcome = request.dispatch()

    if isinstance(outcome, TooLarge):
        _api_logger.info(
            f"SEARCH_EXCLUSION_LIMIT | q={request.params.get('q')} | excluded={excluded}"
        )
        return SearchPage.empty(rank_token)

    if isinstance(outcome, Success):
        return decode_response(SearchPage, outcome.value)

    raise outcome.error


@dataclass
class SearchSession:
    """Caller-owned state for paging through one hashtag search.

    Start one per logical search. ``rank_token`` is pinned from the first
    page and ``exclude_ids`` grows with every page received.
    """

    query: str
    rank_token: str | None = None
    exclude_ids: list[str] = field(default_factory=list)
    has_more: bool = True
    pages_fetched: int = 0
    _known_ids: set[str] = field(default_factory=set, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._known_ids.update(self.exclude_ids)

    def record(self, page: SearchPage) -> None:
        """Fold a received page into the session."""
        if self.rank_token is None:
            self.rank_token = page.rank_token
        for result_id in page.result_ids:
            if result_id not in self._known_ids:
                self._known_ids.add(result_id)
                self.exclude_ids.append(result_id)
        self.has_more = page.has_more and bool(page.results)
        self.pages_fetched += 1
