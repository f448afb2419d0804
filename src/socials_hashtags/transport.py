"""Request builder and dispatcher over httpx.

Usage:
    transport = ApiTransport(config)
    info = transport.request("tags/python/info/").get_response(TagInfo)

``dispatch()`` never raises for remote problems; it returns a Success,
TooLarge or Failure outcome. ``get_response()`` decodes a Success into a
model and raises the carried error otherwise.
"""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import HashtagClientConfig
from .constants import HEADERS_TOO_LARGE_STATUS_CODES
from .exceptions import HashtagAPIError, RequestHeadersTooLargeError
from .log import API_LOGGER_NAME
from .types import DispatchResult, Failure, Success, TooLarge

_api_logger = logging.getLogger(API_LOGGER_NAME)

M = TypeVar("M", bound=BaseModel)

# Never written to the log
_SECRET_PARAMS = {"_csrftoken", "sessionid"}


def decode_response(model: type[M], payload: dict[str, Any]) -> M:
    """Build a response model from a decoded JSON body.

    Raises:
        HashtagAPIError: If the body does not fit the model.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise HashtagAPIError(
            f"Malformed {model.__name__} response: {e.error_count()} validation error(s)",
            error_type="malformed_response",
            payload=payload,
        ) from e


def measure_header_bytes(request: httpx.Request) -> int:
    """Size of the HTTP/1.1 request line plus header block, in bytes."""
    request_line = b"%s %s HTTP/1.1\r\n" % (request.method.encode("ascii"), request.url.raw_path)
    size = len(request_line)
    for name, value in request.headers.raw:
        size += len(name) + len(value) + 4  # ": " and CRLF
    return size + 2  # blank line ending the header block


class ApiRequest:
    """A single outbound call being assembled.

    Query parameters go in the URL. Adding a POST field switches the
    request to POST with a form-encoded body.
    """

    def __init__(self, transport: "ApiTransport", path: str):
        self._transport = transport
        self.path = path
        self.params: dict[str, str] = {}
        self.posts: dict[str, str] = {}

    @property
    def method(self) -> str:
        return "POST" if self.posts else "GET"

    def add_param(self, name: str, value: Any) -> "ApiRequest":
        """Attach a query parameter. Chainable."""
        self.params[name] = _stringify(value)
        return self

    def add_post(self, name: str, value: Any) -> "ApiRequest":
        """Attach a form body field. Chainable."""
        self.posts[name] = _stringify(value)
        return self

    def dispatch(self) -> DispatchResult:
        """Send the request and classify the outcome."""
        return self._transport.send(self)

    def get_response(self, model: type[M]) -> M:
        """Send the request and decode the body into ``model``.

        Raises:
            RequestHeadersTooLargeError: If the request was too large to send.
            HashtagAPIError: For any other remote or decoding failure.
        """
        outcome = self.dispatch()
        if isinstance(outcome, Success):
            return decode_response(model, outcome.value)
        raise outcome.error


class ApiTransport:
    """Sends ApiRequests through an httpx.Client.

    Handles base URL, default headers and session cookie. Logs every call
    to the API log without secrets.
    """

    def __init__(
        self,
        config: HashtagClientConfig,
        http_client: httpx.Client | None = None,
    ):
        """Initialize transport.

        Args:
            config: Client configuration.
            http_client: Pre-built httpx client (tests pass one with a
                MockTransport). Built from ``config`` when omitted.
        """
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers={
                "User-Agent": config.user_agent,
                "Accept-Language": "en-US",
            },
            cookies={"sessionid": config.session_id} if config.session_id else None,
        )
        self._api_call_count = 0

    def request(self, path: str) -> ApiRequest:
        """Begin building a call to ``path`` (relative to the base URL)."""
        return ApiRequest(self, path)

    def send(self, api_request: ApiRequest) -> DispatchResult:
        self._api_call_count += 1
        call_number = self._api_call_count

        log_params = {k: v for k, v in api_request.params.items() if k not in _SECRET_PARAMS}
        _api_logger.info(
            f"API CALL #{call_number} | {api_request.method} {api_request.path} | params: {log_params}"
        )

        http_request = self._client.build_request(
            api_request.method,
            api_request.path,
            params=api_request.params or None,
            data=api_request.posts or None,
        )

        limit = self.config.max_request_header_bytes
        if limit is not None:
            header_bytes = measure_header_bytes(http_request)
            if header_bytes > limit:
                _api_logger.warning(
                    f"API CALL #{call_number} | TOO LARGE: {header_bytes} header bytes (limit {limit})"
                )
                return TooLarge(RequestHeadersTooLargeError(
                    f"Request headers are {header_bytes} bytes, limit is {limit}",
                    header_bytes=header_bytes,
                ))

        try:
            response = self._client.send(http_request)
        except httpx.TransportError as e:
            _api_logger.error(f"API CALL #{call_number} | TRANSPORT ERROR: {e!r}")
            error = HashtagAPIError(
                f"Transport error: {e}",
                error_type="transport",
                is_retryable=True,
            )
            error.__cause__ = e
            return Failure(error)

        if response.status_code in HEADERS_TOO_LARGE_STATUS_CODES:
            _api_logger.warning(f"API CALL #{call_number} | TOO LARGE: HTTP {response.status_code}")
            return TooLarge(RequestHeadersTooLargeError(
                f"Server rejected request with HTTP {response.status_code}",
                status_code=response.status_code,
            ))

        return self._classify(call_number, response)

    def _classify(self, call_number: int, response: httpx.Response) -> DispatchResult:
        try:
            payload = response.json()
        except ValueError as e:
            _api_logger.error(f"API CALL #{call_number} | ERROR: undecodable body (HTTP {response.status_code})")
            error = HashtagAPIError(
                f"Response body is not valid JSON (HTTP {response.status_code})",
                status_code=response.status_code,
                error_type="malformed_response",
                is_retryable=response.status_code >= 500,
            )
            error.__cause__ = e
            return Failure(error)

        if not isinstance(payload, dict):
            _api_logger.error(f"API CALL #{call_number} | ERROR: body is not a JSON object")
            return Failure(HashtagAPIError(
                "Response body is not a JSON object",
                status_code=response.status_code,
                error_type="malformed_response",
            ))

        if response.status_code >= 400 or payload.get("status") == "fail":
            _api_logger.error(f"API CALL #{call_number} | ERROR: HTTP {response.status_code} {payload}")
            return Failure(HashtagAPIError(
                payload.get("message") or f"Request failed with HTTP {response.status_code}",
                status_code=response.status_code,
                error_type=payload.get("error_type"),
                is_retryable=response.status_code == 429 or response.status_code >= 500,
                payload=payload,
            ))

        _api_logger.info(f"API CALL #{call_number} | SUCCESS: {list(payload.keys())}")
        return Success(payload)

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "ApiTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)
