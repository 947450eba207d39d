"""Rich output helpers shared by the CLI commands and the menu shell."""

from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .catalog import Book
from .loans import Loan

# Rich console for pretty output
console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{escape(message)}[/dim]")


def describe_error(error: Exception) -> str:
    """Message for an error caught at the interaction boundary."""
    if isinstance(error, ValidationError):
        first = error.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        return f"{field}: {first['msg']}" if field else first["msg"]
    return str(error)


def format_due_date(loan: Loan) -> str:
    """Render a loan's due date as a ctime-style timestamp.

    Epochs outside the platform's datetime range fall back to raw seconds.
    """
    try:
        return loan.due_date.ctime()
    except (OverflowError, OSError, ValueError):
        return f"{loan.due_at} (epoch seconds)"


def format_book_table(books: list[Book], title: str = "Books") -> Table:
    """Create a rich table for displaying books."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", no_wrap=False, max_width=40)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("ISBN", style="yellow")

    for book in books:
        table.add_row(escape(book.title), escape(book.author), escape(book.isbn))

    return table


def format_loan_table(
    loans: list[Loan],
    title: str = "Books on loan",
    now: Optional[float] = None,
) -> Table:
    """Create a rich table for displaying loans."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Customer", style="cyan")
    table.add_column("ISBN", style="yellow")
    table.add_column("Due Date")
    table.add_column("Status")

    for loan in loans:
        status = "[bold red]OVERDUE[/bold red]" if loan.is_overdue(now) else "[green]active[/green]"
        table.add_row(
            escape(loan.customer_name), escape(loan.isbn), format_due_date(loan), status
        )

    return table


def show_book(book: Book) -> None:
    """Print a single book's details."""
    console.print(f"[bold]Title:[/bold] {escape(book.title)}")
    console.print(f"[bold]Author:[/bold] {escape(book.author)}")
    console.print(f"[bold]ISBN:[/bold] {escape(book.isbn)}")


def show_catalog(books: list[Book]) -> None:
    """Print the title-sorted catalog listing."""
    if not books:
        console.print("[dim]The library is empty.[/dim]")
        return
    console.print(format_book_table(books, title="Books in the library"))


def show_search_results(books: list[Book]) -> None:
    """Print books matching a search."""
    if not books:
        console.print("[dim]No matching books found.[/dim]")
        return
    console.print(format_book_table(books, title="Matching books"))


def show_loans(loans: list[Loan]) -> None:
    """Print every active loan."""
    if not loans:
        console.print("[dim]No books are currently on loan.[/dim]")
        return
    console.print(format_loan_table(loans))


def show_customer_loans(customer_name: str, loans: list[Loan]) -> None:
    """Print the loans of one customer."""
    if not loans:
        console.print("[dim]No loans found for the customer.[/dim]")
        return
    console.print(format_loan_table(loans, title=f"Loans for {escape(customer_name)}"))
