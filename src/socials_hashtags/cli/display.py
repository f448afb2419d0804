"""Display functions for hashtag commands - pure functions for Rich output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..models import RelatedTags, SearchPage, TagFeed, TagInfo


def show_tag_info(console: Console, info: TagInfo) -> None:
    """Display hashtag metadata."""
    lines = [
        f"[bold]#{info.name}[/bold]",
        f"ID: [cyan]{info.id or '-'}[/cyan]",
        f"Posts: [green]{info.media_count:,}[/green]",
        f"Following: {'yes' if info.following else 'no'}",
    ]
    if info.subtitle:
        lines.append(f"[dim]{info.subtitle}[/dim]")
    console.print(Panel("\n".join(lines), title="Hashtag Info", border_style="cyan"))


def show_search_page(console: Console, page: SearchPage, page_number: int) -> None:
    """Display one page of search results."""
    if not page.results:
        console.print(f"[yellow]Page {page_number}: no results.[/yellow]")
        return

    table = Table(title=f"Search Results - page {page_number}")
    table.add_column("ID", style="cyan")
    table.add_column("Hashtag", style="green")
    table.add_column("Posts", justify="right", style="yellow")

    for result in page.results:
        table.add_row(result.id, f"#{result.name}", f"{result.media_count:,}")

    console.print(table)


def show_related(console: Console, related: RelatedTags) -> None:
    """Display related hashtags."""
    if not related.related:
        console.print("[yellow]No related hashtags.[/yellow]")
        return

    table = Table(title="Related Hashtags")
    table.add_column("Hashtag", style="green")
    table.add_column("ID", style="cyan")

    for tag in related.related:
        table.add_row(f"#{tag.name}", tag.id or "-")

    console.print(table)


def show_feed_summary(console: Console, hashtag: str, feed: TagFeed, rank_token: str) -> None:
    """Display a short summary of a hashtag feed page."""
    story = feed.story
    lines = [
        f"[bold]#{hashtag}[/bold]",
        f"Items: [green]{len(feed.items)}[/green]  Ranked: [green]{len(feed.ranked_items)}[/green]",
        f"Story tray: [cyan]{story.id if story else '-'}[/cyan] ({len(story.items) if story else 0} items)",
        f"More available: {'yes' if feed.more_available else 'no'}",
        f"Rank token: [dim]{rank_token}[/dim]",
    ]
    if feed.next_max_id:
        lines.append(f"Next max id: [dim]{feed.next_max_id}[/dim]")
    console.print(Panel("\n".join(lines), title="Hashtag Feed", border_style="green"))
