"""Exceptions raised by the hashtag client.

Three kinds of failure exist:

- InvalidArgumentError: a caller mistake detected before any network call.
- HashtagAPIError: anything the remote service or the transport reported.
- RequestHeadersTooLargeError: the request was too big for the transport to
  carry. Only hashtag search intercepts it; everywhere else it propagates
  like any other HashtagAPIError.
"""

from __future__ import annotations

from typing import Any


class InvalidArgumentError(ValueError):
    """A malformed argument was rejected before any request was sent."""


class HashtagAPIError(Exception):
    """Base exception for remote and transport failures."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        is_retryable: bool = False,
        payload: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_type = error_type
        self.is_retryable = is_retryable
        self.payload = payload


class RequestHeadersTooLargeError(HashtagAPIError):
    """The request line and headers exceeded what the transport accepts."""

    def __init__(
        self,
        message: str = "Request headers are too large",
        status_code: int | None = None,
        header_bytes: int | None = None,
    ):
        super().__init__(message, status_code=status_code, error_type="headers_too_large")
        self.header_bytes = header_bytes
