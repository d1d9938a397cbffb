"""Command-line interface for the Open Library client.

Built with Typer for commands and Rich for output.
"""

import logging
from typing import Any, Optional

import typer
from rich.console import Console

from ._version import __version__
from .client import OpenLibraryClient
from .config import get_config
from .exceptions import OpenLibraryError
from .schemas import ResultPage

# Create the main app
app = typer.Typer(
    name="openlibrary",
    help="Look up books, editions and authors on Open Library.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def get_client() -> OpenLibraryClient:
    """Create the client used by commands."""
    return OpenLibraryClient()


def print_record(record: Any) -> None:
    """Print a single record as JSON."""
    console.print_json(data=record)


def print_page(result: ResultPage) -> None:
    """Print a result page as JSON followed by a pagination summary."""
    console.print_json(data=result.model_dump(mode="json", exclude={"pagination"}))
    p = result.pagination
    if p is not None:
        print_info(
            f"Page {p.current_page} of {p.total_pages} "
            f"({p.total_items} items, {p.per_page} per page)"
        )


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Look up books, editions and authors on Open Library."""
    try:
        config = get_config()
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    errors = config.validate()
    if errors:
        for error in errors:
            print_error(error)
        raise typer.Exit(1)

    level = "DEBUG" if verbose else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# ============================================================================
# Lookup Commands
# ============================================================================


@app.command()
def book(
    olid: str = typer.Argument(..., help="Open Library edition ID, e.g. OL7353617M"),
) -> None:
    """Show a book record by its Open Library ID."""
    try:
        record = get_client().get_book_by_olid(olid)
    except OpenLibraryError as e:
        print_error(f"Open Library error: {e}")
        raise typer.Exit(1)

    print_record(record)


@app.command()
def author(
    key: str = typer.Argument(..., help="Open Library author key, e.g. OL23919A"),
) -> None:
    """Show an author record by key."""
    try:
        record = get_client().get_author_by_key(key)
    except OpenLibraryError as e:
        print_error(f"Open Library error: {e}")
        raise typer.Exit(1)

    print_record(record)


@app.command()
def editions(
    isbn: Optional[str] = typer.Option(None, "--isbn", "-i", help="ISBN-10 or ISBN-13"),
    lccn: Optional[str] = typer.Option(None, "--lccn", help="Library of Congress Control Number"),
    oclc: Optional[str] = typer.Option(None, "--oclc", help="OCLC number"),
    limit: int = typer.Option(20, "--limit", "-l", min=0, help="Results per page"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
) -> None:
    """Find editions by ISBN, LCCN or OCLC number.

    Exactly one identifier option must be given.
    """
    given = [name for name, value in (("isbn", isbn), ("lccn", lccn), ("oclc", oclc)) if value]
    if len(given) != 1:
        print_error("Provide exactly one of --isbn, --lccn or --oclc")
        raise typer.Exit(1)

    client = get_client()
    try:
        if isbn:
            result = client.get_editions_by_isbn(isbn, limit=limit, page=page)
        elif lccn:
            result = client.get_editions_by_lccn(lccn, limit=limit, page=page)
        else:
            result = client.get_editions_by_oclc(oclc, limit=limit, page=page)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except OpenLibraryError as e:
        print_error(f"Open Library error: {e}")
        raise typer.Exit(1)

    print_page(result)


@app.command("work-editions")
def work_editions(
    key: str = typer.Argument(..., help="Open Library work key, e.g. OL45804W"),
    limit: int = typer.Option(20, "--limit", "-l", min=0, help="Results per page (0 for all)"),
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page number"),
) -> None:
    """List the editions of a work."""
    try:
        result = get_client().get_editions_of_work(key, limit=limit, page=page)
    except OpenLibraryError as e:
        print_error(f"Open Library error: {e}")
        raise typer.Exit(1)

    print_page(result)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"openlibrary-client version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
