"""Client configuration loaded from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .constants import DEFAULT_BASE_URL, DEFAULT_SEARCH_COUNT, DEFAULT_USER_AGENT


class HashtagClientConfig(BaseModel):
    """Settings for the hashtag API client.

    ``max_request_header_bytes`` bounds the request line plus headers of
    every outgoing request. Requests over the bound are not sent and are
    reported as too large, the same as a 414/431 answer from the server.
    Leave it unset to rely on the server's limit alone.
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    session_id: str = ""
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_request_header_bytes: int | None = Field(default=None, gt=0)
    search_count: int = Field(default=DEFAULT_SEARCH_COUNT, ge=1)
    log_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "HashtagClientConfig":
        """Load configuration from environment variables (and ``.env``)."""
        load_dotenv()

        values: dict[str, object] = {}

        base_url = os.getenv("HASHTAG_API_BASE_URL")
        if base_url:
            values["base_url"] = base_url

        user_agent = os.getenv("HASHTAG_API_USER_AGENT")
        if user_agent:
            values["user_agent"] = user_agent

        values["session_id"] = os.getenv("HASHTAG_API_SESSION_ID", "")

        timeout = os.getenv("HASHTAG_API_TIMEOUT")
        if timeout:
            values["timeout_seconds"] = timeout

        max_header_bytes = os.getenv("HASHTAG_API_MAX_HEADER_BYTES")
        if max_header_bytes:
            values["max_request_header_bytes"] = max_header_bytes

        search_count = os.getenv("HASHTAG_API_SEARCH_COUNT")
        if search_count:
            values["search_count"] = search_count

        log_dir = os.getenv("HASHTAG_API_LOG_DIR")
        if log_dir:
            values["log_dir"] = log_dir

        return cls.model_validate(values)
