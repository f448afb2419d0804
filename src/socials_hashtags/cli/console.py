"""Rich console singleton for CLI output."""

import sys

from rich.console import Console

from ..exceptions import HashtagAPIError

# Windows cp1252 has no box drawing characters
console = Console(safe_box=sys.platform == "win32")


def print_error(error: Exception) -> None:
    """Print a failed command's error, with API status details when known."""
    if not isinstance(error, HashtagAPIError):
        console.print(f"[red]Error: {error}[/red]")
        return

    console.print(f"[red]Error: {error.message}[/red]")
    details = {"status": error.status_code, "type": error.error_type}
    for key, value in details.items():
        if value:
            console.print(f"  [dim]{key}:[/dim] [yellow]{value}[/yellow]")
    if error.is_retryable:
        console.print("  [dim]Temporary failure, try again later.[/dim]")
