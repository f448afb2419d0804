"""Dispatch outcome types.

A dispatched request resolves to exactly one of:

- Success: the decoded JSON body.
- TooLarge: the request was rejected for its header size.
- Failure: any other remote or transport error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .exceptions import HashtagAPIError, RequestHeadersTooLargeError


@dataclass(frozen=True)
class Success:
    """Request completed and the body decoded to a JSON object."""

    value: dict[str, Any]

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class TooLarge:
    """Request could not be carried because its headers were too large."""

    error: RequestHeadersTooLargeError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Request failed for any other reason."""

    error: HashtagAPIError

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


DispatchResult = Union[Success, TooLarge, Failure]
