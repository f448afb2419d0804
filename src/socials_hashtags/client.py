"""Top level client wiring configuration, transport and APIs together."""

from __future__ import annotations

import httpx

from .config import HashtagClientConfig
from .hashtag import HashtagAPI
from .log import configure_api_logging
from .story import MediaSeenRequests
from .transport import ApiTransport


class HashtagClient:
    """Entry point for hashtag operations.

    Example:
        with HashtagClient(HashtagClientConfig.from_env()) as client:
            page = client.hashtag.search("python")
            info = client.hashtag.get_info(page.results[0].name)
    """

    def __init__(
        self,
        config: HashtagClientConfig | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            config: Client configuration. Loaded from the environment if omitted.
            http_client: Optional pre-built httpx client.
        """
        self.config = config or HashtagClientConfig.from_env()
        if self.config.log_dir is not None:
            configure_api_logging(self.config.log_dir)

        self.transport = ApiTransport(self.config, http_client=http_client)
        self.media_seen = MediaSeenRequests(self.transport)
        self.hashtag = HashtagAPI(
            self.transport,
            self.media_seen,
            search_count=self.config.search_count,
        )

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "HashtagClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
