"""Argument checks run before any request is built.

Pure functions - no side effects, no network.
"""

from __future__ import annotations

import re
import uuid
from typing import Iterable
from urllib.parse import quote

from .exceptions import InvalidArgumentError

# Word characters plus any non-ASCII BMP character (combining marks in
# Devanagari, Tamil etc. are not \w). No "#", whitespace or astral emoji.
HASHTAG_PATTERN = re.compile(r"(?:\w|[^\x00-\x7F\s\U00010000-\U0010FFFF])+", re.UNICODE)

RANK_TOKEN_PATTERN = re.compile(r"\S+")

NUMERIC_ID_PATTERN = re.compile(r"[0-9]+")


def validate_hashtag_text(hashtag: str) -> str:
    """Ensure text is a bare hashtag (no leading "#").

    Raises:
        InvalidArgumentError: If the hashtag is empty or not hashtag syntax.
    """
    if not isinstance(hashtag, str) or not hashtag:
        raise InvalidArgumentError("Hashtag must be a non-empty string.")
    if not HASHTAG_PATTERN.fullmatch(hashtag):
        raise InvalidArgumentError(f'"{hashtag}" is not a valid hashtag name.')
    return hashtag


def validate_query_text(query: str) -> str:
    """Free-text search query check. Looser than hashtag validation."""
    if not isinstance(query, str) or query == "":
        raise InvalidArgumentError("Query must be a non-empty string.")
    return query


def validate_rank_token(rank_token: str | None, required: bool = True) -> str | None:
    """Check the shape of a rank token.

    Args:
        rank_token: Opaque token from a previous page, or None.
        required: Whether a missing token is an error.

    Returns:
        The token unchanged (None only when not required).

    Raises:
        InvalidArgumentError: If the token is missing when required, or malformed.
    """
    if rank_token is None:
        if required:
            raise InvalidArgumentError("A rank token is required.")
        return None
    if not isinstance(rank_token, str) or not RANK_TOKEN_PATTERN.fullmatch(rank_token):
        raise InvalidArgumentError(f'"{rank_token}" is not a valid rank token.')
    return rank_token


def validate_exclude_ids(exclude_ids: Iterable[str | int]) -> list[str]:
    """Normalise exclusion ids to numeric strings, keeping their order.

    Raises:
        InvalidArgumentError: If any id is not a non-negative integer.
    """
    normalised = []
    for exclude_id in exclude_ids:
        if isinstance(exclude_id, bool):
            raise InvalidArgumentError(f'Invalid exclude id "{exclude_id}".')
        if isinstance(exclude_id, int) and exclude_id >= 0:
            normalised.append(str(exclude_id))
        elif isinstance(exclude_id, str) and NUMERIC_ID_PATTERN.fullmatch(exclude_id):
            normalised.append(exclude_id)
        else:
            raise InvalidArgumentError(f'Invalid exclude id "{exclude_id}".')
    return normalised


def encode_hashtag(hashtag: str) -> str:
    """Percent-encode a validated hashtag for use in a request path."""
    return quote(hashtag, safe="")


def generate_rank_token() -> str:
    """Create a fresh rank token for a new feed or search session."""
    return str(uuid.uuid4())
