"""Command-line interface for libcatalog.

Built with Typer for commands and Rich for output. Running without a
command starts the interactive menu.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from .catalog import Book
from .config import Config, get_config
from .display import (
    console,
    describe_error,
    print_error,
    print_info,
    print_success,
    print_warning,
    show_book,
    show_catalog,
    show_customer_loans,
    show_loans,
    show_search_results,
)
from .errors import LibraryError, StoreError
from .library import Library, initialize_stores, open_library
from .shell import MenuShell

# Create the main app
app = typer.Typer(
    name="libcatalog",
    help="Manage a small library's books and loans.",
)


# ============================================================================
# Helper Functions
# ============================================================================


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@contextmanager
def library_session(config: Config) -> Generator[Library, None, None]:
    """Open a library for one command and save it if the command succeeds.

    Library errors and invalid field values are reported and end the
    command with exit code 1 without saving.
    """
    try:
        with open_library(config) as library:
            yield library
    except StoreError as e:
        print_error(str(e))
        if not (config.books_path.exists() and config.loans_path.exists()):
            print_info("Run 'libcatalog init' to create empty stores.")
        raise typer.Exit(1)
    except (LibraryError, ValueError) as e:
        print_error(describe_error(e))
        raise typer.Exit(1)


def run_menu(config: Config) -> None:
    """Run the interactive menu over one library session."""
    with library_session(config) as library:
        MenuShell(library, default_loan_days=config.default_loan_days).run()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    books: Optional[Path] = typer.Option(None, "--books", "-b", help="Books store file"),
    loans: Optional[Path] = typer.Option(None, "--loans", "-l", help="Loans store file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Manage a small library's books and loans."""
    config = get_config().with_paths(books=books, loans=loans)
    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        run_menu(config)


# ============================================================================
# Book Commands
# ============================================================================


@app.command()
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Book title (one word)"),
    author: str = typer.Argument(..., help="Book author (one word)"),
    isbn: str = typer.Argument(..., help="ISBN"),
) -> None:
    """Add a book to the catalog."""
    with library_session(ctx.obj) as library:
        book = library.catalog.add(Book(title=title, author=author, isbn=isbn))
        print_success(f"Book added: {book}")


@app.command()
def remove(
    ctx: typer.Context,
    isbn: str = typer.Argument(..., help="ISBN of the book to remove"),
) -> None:
    """Remove a book from the catalog."""
    with library_session(ctx.obj) as library:
        library.catalog.remove(isbn)
        print_success(f"Book with ISBN {isbn} removed.")


@app.command()
def find(
    ctx: typer.Context,
    isbn: str = typer.Argument(..., help="ISBN to look up"),
) -> None:
    """Show the book with the given ISBN."""
    with library_session(ctx.obj) as library:
        book = library.catalog.find_by_isbn(isbn)
        if book is None:
            print_warning(f"Book with ISBN {isbn} not found.")
            raise typer.Exit(1)
        show_book(book)


@app.command("list")
def list_books(ctx: typer.Context) -> None:
    """List all books sorted by title."""
    with library_session(ctx.obj) as library:
        show_catalog(library.catalog.list_books())


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument("", help="Text to find in titles or authors"),
) -> None:
    """Search books by title or author (case-sensitive)."""
    with library_session(ctx.obj) as library:
        show_search_results(library.catalog.search(query))


# ============================================================================
# Loan Commands
# ============================================================================


@app.command()
def lend(
    ctx: typer.Context,
    customer: str = typer.Argument(..., help="Customer name"),
    isbn: str = typer.Argument(..., help="ISBN of the book to lend"),
    days: Optional[int] = typer.Option(None, "--days", "-d", help="Days until due"),
) -> None:
    """Lend a book to a customer."""
    config: Config = ctx.obj
    if days is None:
        days = config.default_loan_days

    with library_session(config) as library:
        loan = library.loans.lend(customer, isbn, days)
        print_success(f"Book {loan.isbn} lent to {loan.customer_name}.")


@app.command("return")
def return_book(
    ctx: typer.Context,
    customer: str = typer.Argument(..., help="Customer name"),
    isbn: str = typer.Argument(..., help="ISBN of the book to return"),
) -> None:
    """Return a book lent to a customer."""
    with library_session(ctx.obj) as library:
        library.loans.return_loan(customer, isbn)
        print_success(f"Book {isbn} returned by {customer}.")


@app.command()
def loans(ctx: typer.Context) -> None:
    """List all active loans."""
    with library_session(ctx.obj) as library:
        show_loans(library.loans.list_loans())


@app.command("loan-search")
def loan_search(
    ctx: typer.Context,
    customer: str = typer.Argument(..., help="Exact customer name"),
) -> None:
    """List the loans of one customer."""
    with library_session(ctx.obj) as library:
        show_customer_loans(customer, library.loans.search_by_customer(customer))


# ============================================================================
# Store Commands
# ============================================================================


@app.command()
def init(ctx: typer.Context) -> None:
    """Create empty book and loan stores if they do not exist."""
    config: Config = ctx.obj
    try:
        created = initialize_stores(config)
    except StoreError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if not created:
        print_info("Stores already exist.")
        return
    for store in created:
        print_success(f"Created {store.kind} store at {store.path}")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"libcatalog version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
