"""Typer app configuration, logging setup and commands."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from dotenv import load_dotenv

from ..client import HashtagClient
from ..config import HashtagClientConfig
from ..exceptions import HashtagAPIError, InvalidArgumentError
from ..pagination import SearchSession
from ..validation import generate_rank_token
from .console import console, print_error
from .display import show_feed_summary, show_related, show_search_page, show_tag_info

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="socials-hashtags",
    help="Look up, search and explore hashtags",
    add_completion=False,
)


def setup_logging() -> None:
    """Keep library loggers off the console."""
    for logger_name in ["httpx", "httpcore"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False


def _build_client() -> HashtagClient:
    return HashtagClient(HashtagClientConfig.from_env())


def _fail(error: Exception) -> None:
    print_error(error)
    raise typer.Exit(1)


@app.command()
def info(
    hashtag: str = typer.Argument(..., help="Hashtag, without the #"),
) -> None:
    """Show detailed information about a hashtag."""
    try:
        with _build_client() as client:
            tag_info = client.hashtag.get_info(hashtag)
    except (InvalidArgumentError, HashtagAPIError) as e:
        _fail(e)
    show_tag_info(console, tag_info)


@app.command()
def related(
    hashtag: str = typer.Argument(..., help="Hashtag, without the #"),
) -> None:
    """List hashtags related to a hashtag."""
    try:
        with _build_client() as client:
            related_tags = client.hashtag.get_related(hashtag)
    except (InvalidArgumentError, HashtagAPIError) as e:
        _fail(e)
    show_related(console, related_tags)


@app.command()
def search(
    query: str = typer.Argument(..., help="Text the hashtags should contain"),
    pages: int = typer.Option(1, "--pages", "-p", min=1, help="Maximum pages to fetch"),
) -> None:
    """Search hashtags, paging by excluding already seen results."""
    session = SearchSession(query=query)
    try:
        with _build_client() as client:
            for page_number, page in enumerate(client.hashtag.search_pages(session, max_pages=pages), 1):
                show_search_page(console, page, page_number)
    except (InvalidArgumentError, HashtagAPIError) as e:
        _fail(e)

    console.print(
        f"[dim]{session.pages_fetched} page(s), {len(session.exclude_ids)} hashtag(s), "
        f"more available: {'yes' if session.has_more else 'no'}[/dim]"
    )


@app.command()
def feed(
    hashtag: str = typer.Argument(..., help="Hashtag, without the #"),
    rank_token: Optional[str] = typer.Option(None, "--rank-token", "-r", help="Feed session token (new one if omitted)"),
    max_id: Optional[str] = typer.Option(None, "--max-id", "-m", help="Pagination cursor from a previous page"),
) -> None:
    """Show a page of a hashtag's media feed."""
    token = rank_token or generate_rank_token()
    try:
        with _build_client() as client:
            tag_feed = client.hashtag.get_feed(hashtag, token, max_id)
    except (InvalidArgumentError, HashtagAPIError) as e:
        _fail(e)
    show_feed_summary(console, hashtag, tag_feed, token)


setup_logging()


def main() -> None:
    """CLI entry point."""
    app()
