import os
import json
from typing import List, Any, Dict, Sequence

from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from library_catalog.book import Book
from library_catalog.history import Event
from library_catalog.models import BookView, StatsModel

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()


def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode


def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, "plain").lower()


def _dump(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False))


def print_list_result(books: Sequence[Book]) -> None:
    """Print books in the current output mode.
    - plain: 'Title by Author [Status]' lines, or 'No books match your criteria.'
    - json: JSON array of book views (history included)
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("No books match your criteria.")
        return

    if mode == "json":
        _dump([BookView.from_book(b).model_dump(mode="json") for b in books])
    elif mode == "rich":
        table = Table(title="📚 Books", show_lines=True, header_style="bold cyan")
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Status", no_wrap=True)
        for b in books:
            style = "green" if b.is_available else "red"
            table.add_row(b.title, b.author, f"[{style}]{b.status.value}[/]")
        _console.print(table)
    else:
        for b in books:
            print(f"{b.title} by {b.author} [{b.status.value}]")


def print_book_detail(book: Book) -> None:
    mode = get_output_mode()

    if mode == "json":
        _dump(BookView.from_book(book).model_dump(mode="json"))
    elif mode == "rich":
        content = (
            f"[bold]Author:[/] {book.author}\n"
            f"[bold]Status:[/] {book.status.value}\n"
            f"[bold]Cover:[/] {book.cover_ref}\n"
            f"[dim]{book.id}[/]"
        )
        _console.print(Panel.fit(content, title=f"📖 {book.title}", border_style="blue"))
    else:
        print("Book Found")
        print(f"Title: {book.title}")
        print(f"Author: {book.author}")
        print(f"Status: {book.status.value}")
        print(f"Cover: {book.cover_ref}")


def print_history_result(book: Book) -> None:
    """Print a book's history, most recent entry first."""
    mode = get_output_mode()
    entries: List[Event] = book.history.entries_newest_first()

    if mode == "json":
        _dump([e.to_dict() for e in entries])
        return

    if not entries:
        print("No history found.")
        return

    if mode == "rich":
        table = Table(title=f"🕘 {book.title}", header_style="bold cyan")
        table.add_column("Status", style="white")
        table.add_column("When", style="dim")
        for e in entries:
            table.add_row(e.status, e.timestamp.strftime("%Y-%m-%d %H:%M:%S"))
        _console.print(table)
    else:
        print(f"History for {book.title}:")
        for e in entries:
            print(f"{e.status} - {e.timestamp.strftime('%Y-%m-%d %H:%M:%S')}")


def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print statistics in the current output mode.
    - plain: one line per count
    - json: JSON object
    - rich: Panel with the dashboard counts
    """
    mode = get_output_mode()
    model = StatsModel(**stats)

    if mode == "json":
        _dump(model.model_dump())
    elif mode == "rich":
        content = (
            f"[bold]Total Books:[/] {model.total_books}\n"
            f"[bold green]Available:[/] {model.available}\n"
            f"[bold red]Borrowed:[/] {model.borrowed}"
        )
        _console.print(Panel.fit(content, title="📊 Stats", border_style="blue"))
    else:
        print(f"Total Books: {model.total_books}")
        print(f"Available: {model.available}")
        print(f"Borrowed: {model.borrowed}")
