import logging
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Confirm, Prompt

from library_catalog.config import settings
from library_catalog.errors import CatalogError, NotFoundError
from library_catalog.library import CatalogService, SEARCH_FIELDS, STATUS_FILTERS
from library_catalog.seed import load_sample_data
from library_catalog.utils.ui_helpers import (
    set_output_mode,
    print_list_result,
    print_book_detail,
    print_history_result,
    print_stats_result,
)
from library_catalog.utils.validators import TextValidator

logger = logging.getLogger(__name__)

console = Console()

SHELL_HELP = (
    "Commands: list [text] | author <text> | add | edit <title> | toggle <title> | "
    "delete <title> | history <title> | stats | help | quit"
)


def build_catalog(sample_data: Optional[bool] = None) -> CatalogService:
    """Fresh catalog for one CLI run, seeded unless disabled."""
    service = CatalogService()
    if settings.load_sample_data if sample_data is None else sample_data:
        load_sample_data(service)
    return service


def _not_found(title: str) -> None:
    print(f'Book titled "{title}" not found.')


# --- Typer CLI Application ---
app = typer.Typer(help=settings.app_name)


@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log catalog operations"),
):
    """Global options for the CLI (output mode, logging)."""
    level = logging.DEBUG if verbose or settings.debug else settings.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    if output:
        set_output_mode(output)


@app.command("list")
def cli_list(
    search: str = typer.Option("", "--search", "-s", help="Text to search for"),
    field: str = typer.Option("title", "--field", "-f", help="Search field: title | author"),
    status: str = typer.Option("all", "--status", help="Status filter: all | available | borrowed"),
):
    """List books sorted by title, optionally searched and filtered."""
    if field.lower() not in SEARCH_FIELDS:
        print(f"Unknown search field: {field}. Use title or author.")
        raise typer.Exit(code=2)
    if status.lower() not in STATUS_FILTERS:
        print(f"Unknown status filter: {status}. Use all, available or borrowed.")
        raise typer.Exit(code=2)

    books = build_catalog().list_filtered(search, field, status)
    print_list_result(books)


@app.command("find")
def cli_find(title: str):
    """Find a book by its exact title (case-insensitive) and show details."""
    book = build_catalog().find(title)
    if book:
        print_book_detail(book)
    else:
        _not_found(title)


@app.command("history")
def cli_history(title: str):
    """Show a book's history, most recent first."""
    book = build_catalog().find(title)
    if book:
        print_history_result(book)
    else:
        _not_found(title)


@app.command("stats")
def cli_stats():
    """Show catalog statistics."""
    print_stats_result(build_catalog().statistics())


@app.command("shell")
def cli_shell(
    empty: bool = typer.Option(False, "--empty", help="Start without the sample books"),
):
    """Interactive session: changes live until the session ends."""
    service = build_catalog(sample_data=False if empty else None)
    console.print(f"[bold]{settings.app_name}[/] ({service.count()} books)")
    console.print(f"[dim]{SHELL_HELP}[/]")

    while True:
        try:
            line = Prompt.ask("library")
        except (EOFError, KeyboardInterrupt):
            break

        parts = line.strip().split(maxsplit=1)
        if not parts:
            continue

        command, args = parts[0].lower(), parts[1] if len(parts) > 1 else ""
        logger.debug("Shell command %s %r", command, args)
        if command in ("quit", "exit", "q"):
            break
        try:
            _run_shell_command(service, command, args)
        except CatalogError as e:
            print(str(e))

    print("Goodbye!")


def _run_shell_command(service: CatalogService, command: str, args: str) -> None:
    if command == "help":
        print(SHELL_HELP)

    elif command == "list":
        print_list_result(service.list_filtered(args, "title"))

    elif command == "author":
        print_list_result(service.list_filtered(args, "author"))

    elif command == "stats":
        print_stats_result(service.statistics())

    elif command == "add":
        title = Prompt.ask("Title")
        author = Prompt.ask("Author")
        if not (TextValidator.validate_title(title) and TextValidator.validate_author(author)):
            print("Title and author are required.")
            return
        service.add(title, author)
        print("Book added successfully!")

    elif command == "edit":
        book = _lookup(service, args)
        title = Prompt.ask("New title", default=book.title)
        author = Prompt.ask("New author", default=book.author)
        if not (TextValidator.validate_title(title) and TextValidator.validate_author(author)):
            print("Title and author are required.")
            return
        service.edit(book.id, title, author)
        print("Book updated successfully!")

    elif command == "toggle":
        book = service.toggle_status(_lookup(service, args).id)
        print(f"Book status updated to {book.status.value}.")

    elif command == "delete":
        book = _lookup(service, args)
        if Confirm.ask(f'Delete "{book.title}"?', default=False):
            service.delete(book.title)
            print(f'"{book.title}" was deleted.')

    elif command == "history":
        print_history_result(_lookup(service, args))

    else:
        print(f"Unknown command: {command}. {SHELL_HELP}")


def _lookup(service: CatalogService, title: str):
    book = service.find(title) if title else None
    if book is None:
        raise NotFoundError(f'titled "{title}"')
    return book


def main() -> None:
    app()


if __name__ == "__main__":
    main()
